"""Orchestrator provider for dependency injection."""
import logging
from typing import TYPE_CHECKING

from ...application.narration.chain import NarrationFallbackChain
from ...application.orchestrator import CaptureOrchestrator
from ...application.output_sequencer import OutputSequencer
from ...core.config import Settings
from ...processing.data_input.camera_source import OpenCVCameraSource
from ...processing.detections.detector import Detector
from ...processing.text.recognizer import StubTextRecognizer

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class OrchestratorProvider:
    """Orchestrator provider - wires every stage into the CaptureOrchestrator"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)

        orchestrator = CaptureOrchestrator(
            camera=container.get(OpenCVCameraSource),
            detector=container.get(Detector),
            chain=container.get(NarrationFallbackChain),
            sequencer=container.get(OutputSequencer),
            text_recognizer=container.get(StubTextRecognizer),
            capture_interval_ms=settings.capture_interval_ms,
            navigation_target=settings.navigation_target,
        )
        container.register_singleton(CaptureOrchestrator, orchestrator)

        logger.info("Registered capture orchestrator")
