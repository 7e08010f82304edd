"""
Model Data Contracts
--------------------

Defines the interface between a detection model and the Detector.
The model is opaque: the Detector only relies on the raw output mapping below.
"""

from typing import Any, Mapping, Protocol

import numpy as np

# Raw output keys (TensorFlow Object Detection API naming).
RAW_BOXES_KEY = "detection_boxes"      # (N, 4) as (y1, x1, y2, x2), normalized
RAW_SCORES_KEY = "detection_scores"    # (N,)
RAW_CLASSES_KEY = "detection_classes"  # (N,) class indices


class DetectionModel(Protocol):
    """
    Protocol defining what a loaded detection model looks like.

    Models must support inference via callable interface: model(frame) -> raw output.
    A leading batch dimension of 1 on any array is tolerated.
    """

    def __call__(self, frame: np.ndarray) -> Mapping[str, Any]:
        """
        Run inference on a frame.

        Args:
            frame: Input frame as numpy array (BGR format)

        Returns:
            Mapping with detection_boxes, detection_scores and detection_classes
        """
        ...
