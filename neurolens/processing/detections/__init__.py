"""
Detections Module
-----------------

Provides detection extraction and normalization:
- DetectionBuilder: Converts raw model output to Detection objects
- Detector: Runs the model on a frame and returns normalized detections
"""

from .builder import (
    DetectionBuilder,
    CONFIDENCE_THRESHOLD,
    FALLBACK_DISTANCE_METERS,
)
from .detector import Detector

__all__ = [
    "DetectionBuilder",
    "Detector",
    "CONFIDENCE_THRESHOLD",
    "FALLBACK_DISTANCE_METERS",
]
