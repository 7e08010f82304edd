"""
Integration tests for control API endpoints.
Uses TestClient with a mocked orchestrator (no camera, model or network).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from neurolens.application.orchestrator import CaptureOrchestrator
from neurolens.application.voice_commands import VoiceCommand
from neurolens.core.exceptions import CaptureError
from neurolens.domain.models.modes import CycleKind, CycleReport, OperatingMode


@pytest.fixture
def mock_orchestrator():
    orchestrator = MagicMock(spec=CaptureOrchestrator)
    orchestrator.mode = OperatingMode.SCENE
    orchestrator.is_processing = False
    orchestrator.is_running = True
    orchestrator.navigation_target = "door"
    orchestrator.capture_interval_ms = 2000
    orchestrator.camera = MagicMock()
    orchestrator.chain = MagicMock()
    orchestrator.chain.cloud_available.return_value = False
    orchestrator.detector = MagicMock()
    orchestrator.detector.is_available.return_value = True
    orchestrator.start = AsyncMock()
    orchestrator.stop = AsyncMock()
    return orchestrator


@pytest.fixture
def mock_container(mock_orchestrator):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        CaptureOrchestrator: mock_orchestrator,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from neurolens.main import app

    with patch("neurolens.main.get_container", return_value=mock_container), patch(
        "neurolens.api.v1.control_controller.get_container", return_value=mock_container
    ):
        with TestClient(app) as c:
            yield c


class TestControlAPI:
    """Tests for /api/v1/control endpoints"""

    def test_lifespan_starts_and_stops_loop(self, mock_container, mock_orchestrator):
        from neurolens.main import app

        with patch("neurolens.main.get_container", return_value=mock_container):
            with TestClient(app):
                mock_orchestrator.start.assert_awaited_once()
        mock_orchestrator.stop.assert_awaited_once()

    def test_capture_success(self, client, mock_orchestrator):
        mock_orchestrator.trigger_vocal.return_value = CycleReport(
            kind=CycleKind.VOCAL,
            mode=OperatingMode.SCENE,
            executed=True,
            announced_text="You're in a indoor area with bright lighting. Close to you: chair.",
            detections=1,
        )
        response = client.post("/api/v1/control/capture")
        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "vocal"
        assert data["executed"] is True
        assert data["detections"] == 1
        assert data["announced_text"].startswith("You're in a indoor area")

    def test_capture_dropped_while_busy(self, client, mock_orchestrator):
        mock_orchestrator.trigger_vocal.return_value = CycleReport(
            kind=CycleKind.VOCAL, mode=OperatingMode.SCENE, executed=False
        )
        response = client.post("/api/v1/control/capture")
        assert response.status_code == 200
        assert response.json()["executed"] is False

    def test_capture_error_maps_to_503(self, client, mock_orchestrator):
        mock_orchestrator.trigger_vocal.side_effect = CaptureError("device busy")
        response = client.post("/api/v1/control/capture")
        assert response.status_code == 503
        assert response.json()["detail"] == "Camera is not available. Please check camera permission."

    def test_change_mode(self, client, mock_orchestrator):
        mock_orchestrator.switch_mode.return_value = OperatingMode.TEXT
        response = client.put("/api/v1/control/mode", json={"mode": "text"})
        assert response.status_code == 200
        assert response.json() == {"mode": "text", "confirmation": "Text reading mode"}
        mock_orchestrator.switch_mode.assert_called_once_with(OperatingMode.TEXT)

    def test_change_mode_invalid(self, client, mock_orchestrator):
        response = client.put("/api/v1/control/mode", json={"mode": "party"})
        assert response.status_code == 422
        mock_orchestrator.switch_mode.assert_not_called()

    def test_ask_success(self, client, mock_orchestrator):
        mock_orchestrator.ask.return_value = CycleReport(
            kind=CycleKind.VOCAL,
            mode=OperatingMode.SCENE,
            executed=True,
            announced_text="I can see 2 objects.",
            detections=2,
        )
        response = client.post("/api/v1/control/ask", json={"question": "How many things are here?"})
        assert response.status_code == 200
        assert response.json()["announced_text"] == "I can see 2 objects."
        mock_orchestrator.ask.assert_awaited_once_with("How many things are here?")

    def test_ask_blank_question(self, client, mock_orchestrator):
        mock_orchestrator.ask.side_effect = ValueError("Question must not be empty")
        response = client.post("/api/v1/control/ask", json={"question": "   "})
        assert response.status_code == 400

    def test_ask_missing_question(self, client):
        response = client.post("/api/v1/control/ask", json={})
        assert response.status_code == 422

    def test_set_navigation_target(self, client, mock_orchestrator):
        mock_orchestrator.set_navigation_target.return_value = "toilet"
        response = client.put("/api/v1/control/navigation-target", json={"target": "Toilet"})
        assert response.status_code == 200
        assert response.json() == {"target": "toilet"}

    def test_set_navigation_target_blank(self, client, mock_orchestrator):
        mock_orchestrator.set_navigation_target.side_effect = ValueError("Navigation target must not be empty")
        response = client.put("/api/v1/control/navigation-target", json={"target": "  "})
        assert response.status_code == 400

    def test_command(self, client, mock_orchestrator):
        mock_orchestrator.handle_command.return_value = VoiceCommand.FIND_OBJECT
        response = client.post("/api/v1/control/command", json={"utterance": "find the chair"})
        assert response.status_code == 200
        assert response.json() == {"command": "find_object"}

    def test_status(self, client):
        response = client.get("/api/v1/control/status")
        assert response.status_code == 200
        assert response.json() == {
            "mode": "scene",
            "is_processing": False,
            "is_running": True,
            "cloud_available": False,
            "detector_available": True,
            "navigation_target": "door",
            "capture_interval_ms": 2000,
        }
