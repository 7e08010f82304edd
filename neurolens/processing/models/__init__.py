"""
Models
------

Detection model contract and the OpenCV DNN provider that satisfies it.
"""

from .contracts import DetectionModel, RAW_BOXES_KEY, RAW_SCORES_KEY, RAW_CLASSES_KEY
from .opencv_ssd import OpenCVSsdModel, load_ssd_model

__all__ = [
    "DetectionModel",
    "RAW_BOXES_KEY",
    "RAW_SCORES_KEY",
    "RAW_CLASSES_KEY",
    "OpenCVSsdModel",
    "load_ssd_model",
]
