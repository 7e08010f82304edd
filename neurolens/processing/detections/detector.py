"""
Detector
--------

Wraps a single opaque detection model. Inference runs in a worker thread;
the raw output is normalized by DetectionBuilder.
"""

import asyncio
import logging
from typing import List, Optional

import numpy as np

from ...core.exceptions import InferenceError
from ...domain.models.detection import Detection
from ..models.contracts import DetectionModel
from .builder import DetectionBuilder

logger = logging.getLogger(__name__)


class Detector:
    """
    Object detector.

    detect() raises InferenceError when no model is loaded, when the frame is
    malformed, or when the model itself raises.
    """

    def __init__(self, model: Optional[DetectionModel] = None):
        self._model = model

    def is_available(self) -> bool:
        return self._model is not None

    @staticmethod
    def _validate_frame(frame: np.ndarray) -> None:
        if frame is None:
            raise InferenceError("Frame cannot be None")
        if not isinstance(frame, np.ndarray):
            raise InferenceError(f"Frame must be a numpy array, got {type(frame).__name__}")
        if frame.ndim != 3 or frame.shape[2] != 3 or frame.size == 0:
            raise InferenceError(f"Frame must be a non-empty (H, W, 3) image, got shape {frame.shape}")

    async def detect(self, frame: np.ndarray) -> List[Detection]:
        """
        Run the model on a frame and return normalized detections.

        Args:
            frame: BGR image (H, W, 3)

        Returns:
            Detections with confidence >= 0.5, in model output order
        """
        if self._model is None:
            raise InferenceError("Detection model is not loaded")
        self._validate_frame(frame)

        try:
            raw = await asyncio.to_thread(self._model, frame)
        except Exception as exc:
            raise InferenceError(f"Detection model failed: {exc}") from exc

        detections = DetectionBuilder.from_raw_output(raw)
        logger.debug(f"Detector: {len(detections)} objects above threshold")
        return detections
