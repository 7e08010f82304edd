"""
Unit tests for the DI container wiring.
"""
import json
import os
from unittest.mock import MagicMock, patch

import httpx
import pytest

from neurolens.application.narration.chain import NarrationFallbackChain
from neurolens.application.orchestrator import CaptureOrchestrator
from neurolens.core.config import reset_settings
from neurolens.di.base_container import BaseContainer
from neurolens.di.container import DIContainer
from neurolens.infrastructure.audio.voice_channel import VoiceChannel
from neurolens.infrastructure.external.mistral_client import MistralChatClient
from neurolens.processing.detections.detector import Detector


@pytest.fixture
def container_env(tmp_path, mock_env):
    """Environment pointing at a temp preferences file and a missing model."""
    env = {
        "PREFERENCES_PATH": str(tmp_path / "prefs.json"),
        "DETECTOR_MODEL_PATH": str(tmp_path / "missing.pb"),
        "DETECTOR_CONFIG_PATH": str(tmp_path / "missing.pbtxt"),
    }
    with patch.dict(os.environ, env, clear=False), patch(
        "neurolens.di.providers.narration_provider.get_shared_http_client",
        return_value=MagicMock(spec=httpx.AsyncClient),
    ):
        reset_settings()
        yield tmp_path
    reset_settings()


class TestDIContainer:
    def test_wires_orchestrator(self, container_env):
        container = DIContainer()
        orchestrator = container.get(CaptureOrchestrator)

        assert orchestrator.capture_interval_ms == 50
        assert orchestrator.navigation_target == "door"
        assert orchestrator.detector is container.get(Detector)
        assert orchestrator.chain is container.get(NarrationFallbackChain)

    def test_missing_model_registers_unavailable_detector(self, container_env):
        assert DIContainer().get(Detector).is_available() is False

    def test_env_key_enables_cloud(self, container_env):
        container = DIContainer()
        assert container.get(MistralChatClient).has_credentials() is True
        assert container.get(NarrationFallbackChain).cloud_available() is True

    def test_preferences_override_environment(self, container_env):
        (container_env / "prefs.json").write_text(
            json.dumps({"cloud_enabled": False, "voice_rate": 1.5}),
            encoding="utf-8",
        )
        container = DIContainer()
        assert container.get(NarrationFallbackChain).cloud_available() is False
        assert container.get(VoiceChannel).settings.rate == 1.5


class TestBaseContainer:
    def test_unregistered_type_raises(self):
        container = BaseContainer()
        assert container.has(Detector) is False
        with pytest.raises(ValueError):
            container.get(Detector)
