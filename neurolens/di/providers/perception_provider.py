"""Perception services provider for dependency injection."""
import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...processing.data_input.camera_source import OpenCVCameraSource
from ...processing.detections.detector import Detector
from ...processing.models.opencv_ssd import load_ssd_model
from ...processing.text.recognizer import StubTextRecognizer

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class PerceptionProvider:
    """Perception provider - capture device, detector and text recognizer"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register perception services.
        A missing or unloadable model still registers a Detector; it reports
        itself unavailable and the orchestrator falls back accordingly.
        """
        settings = container.get(Settings)

        camera = OpenCVCameraSource(settings.camera_source)
        container.register_singleton(OpenCVCameraSource, camera)

        model = load_ssd_model(
            settings.detector_model_path,
            settings.detector_config_path,
            input_size=settings.detector_input_size,
        )
        detector = Detector(model)
        container.register_singleton(Detector, detector)

        container.register_singleton(StubTextRecognizer, StubTextRecognizer())

        logger.info(
            f"Registered perception services (camera={settings.camera_source}, "
            f"detector_available={detector.is_available()})"
        )
