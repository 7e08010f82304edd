"""
Detection Builder
-----------------

Converts raw model output into standardized Detection objects.
This is the only place that interprets the model's output format.
"""

import logging
import math
from typing import Any, List, Mapping, Optional, Sequence

import numpy as np

from ...domain.constants.coco_labels import label_for_class
from ...domain.models.detection import BoundingBox, Detection
from ..models.contracts import RAW_BOXES_KEY, RAW_SCORES_KEY, RAW_CLASSES_KEY

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.5

# Pinhole estimate: distance = (real height * focal length) / (box height * reference dimension)
ASSUMED_OBJECT_HEIGHT_METERS = 1.7
FOCAL_LENGTH_CONSTANT = 600.0
FRAME_REFERENCE_DIMENSION = 300.0
FALLBACK_DISTANCE_METERS = 10.0


def _clamp_unit(value: float) -> float:
    value = float(value)
    # NaN coordinates collapse to the frame edge
    if math.isnan(value):
        return 0.0
    return min(1.0, max(0.0, value))


class DetectionBuilder:
    """
    Builds Detection objects from raw model output.

    Handles box normalization, confidence filtering, label lookup and
    distance estimation.
    """

    @staticmethod
    def normalize_box(y1: float, x1: float, y2: float, x2: float) -> BoundingBox:
        """
        Convert (y1, x1, y2, x2) to (x, y, width, height).

        Corners are clamped into [0, 1] first, so the box never leaves the
        frame. An inverted box from malformed output gets zero width or height.
        """
        left, top = _clamp_unit(x1), _clamp_unit(y1)
        right, bottom = _clamp_unit(x2), _clamp_unit(y2)
        return BoundingBox(
            x=left,
            y=top,
            width=max(0.0, right - left),
            height=max(0.0, bottom - top),
        )

    @staticmethod
    def estimate_distance(box_height: float) -> float:
        """
        Estimate distance in meters from the normalized box height.

        A zero (or unusable) height returns the 10 m fallback, which reads as
        "far / unknown" downstream. The result is always finite.
        """
        if not math.isfinite(box_height) or box_height <= 0:
            return FALLBACK_DISTANCE_METERS
        distance = (ASSUMED_OBJECT_HEIGHT_METERS * FOCAL_LENGTH_CONSTANT) / (
            box_height * FRAME_REFERENCE_DIMENSION
        )
        if not math.isfinite(distance):
            return FALLBACK_DISTANCE_METERS
        return distance

    @staticmethod
    def from_raw_output(raw: Optional[Mapping[str, Any]]) -> List[Detection]:
        """
        Extract detections from raw model output.

        Args:
            raw: Mapping with detection_boxes (N, 4), detection_scores (N)
                and detection_classes (N); a batch dimension of 1 is squeezed

        Returns:
            Detections at or above the confidence threshold, in model order
        """
        detections: List[Detection] = []

        if not raw:
            return detections

        try:
            boxes = DetectionBuilder._as_array(raw.get(RAW_BOXES_KEY), ndim=2)
            scores = DetectionBuilder._as_array(raw.get(RAW_SCORES_KEY), ndim=1)
            classes = DetectionBuilder._as_array(raw.get(RAW_CLASSES_KEY), ndim=1)
        except ValueError as exc:
            logger.warning(f"Unexpected model output shapes: {exc}")
            return detections

        if boxes.shape[-1] != 4:
            logger.warning(f"Unexpected box shape {boxes.shape}; expected (N, 4)")
            return detections

        count = min(len(boxes), len(scores), len(classes))
        for index in range(count):
            score = float(scores[index])
            # NaN compares False and is dropped with the rest.
            if not score >= CONFIDENCE_THRESHOLD:
                continue
            y1, x1, y2, x2 = (float(v) for v in boxes[index])
            box = DetectionBuilder.normalize_box(y1, x1, y2, x2)
            detections.append(
                Detection(
                    label=label_for_class(classes[index]),
                    confidence=min(score, 1.0),
                    bounding_box=box,
                    estimated_distance_meters=DetectionBuilder.estimate_distance(box.height),
                )
            )

        return detections

    @staticmethod
    def _as_array(value: Optional[Sequence[Any]], ndim: int) -> np.ndarray:
        if value is None:
            raise ValueError("missing output tensor")
        array = np.asarray(value, dtype=np.float64)
        while array.ndim > ndim and array.shape[0] == 1:
            array = array[0]
        if array.ndim != ndim:
            raise ValueError(f"expected {ndim}-d tensor, got shape {array.shape}")
        return array
