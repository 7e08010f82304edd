"""
Scene Classifier
----------------

Pure functions from (detections, frame) to scene type, lighting and dominant
color. No state, no side effects: classifying the same input twice gives the
same answer.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import time
from typing import FrozenSet, Optional, Sequence, Tuple

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
import numpy as np

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ...domain.models.detection import Detection
from ...domain.models.scene import Lighting, SceneClassification, SceneSummary, SceneType

# Evaluated top to bottom, first match wins.
SCENE_RULES: Tuple[Tuple[FrozenSet[str], SceneType], ...] = (
    (frozenset({"car", "traffic light", "street sign"}), SceneType.STREET),
    (frozenset({"tree", "bench", "bicycle"}), SceneType.OUTDOOR),
    (frozenset({"chair", "table", "couch"}), SceneType.INDOOR),
)

BRIGHT_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.3


class SceneClassifier:
    """Scene classification helpers (all static)."""

    @staticmethod
    def scene_type(detections: Sequence[Detection]) -> SceneType:
        labels = {detection.label.lower() for detection in detections or ()}
        for trigger_labels, scene in SCENE_RULES:
            if labels & trigger_labels:
                return scene
        return SceneType.UNKNOWN

    @staticmethod
    def lighting(frame: Optional[np.ndarray]) -> Lighting:
        """Bucket mean brightness (normalized to [0, 1]): >0.7 bright, >0.3 moderate, else dim."""
        if frame is None or frame.size == 0:
            return Lighting.DIM
        brightness = float(np.mean(frame)) / 255.0
        if brightness > BRIGHT_THRESHOLD:
            return Lighting.BRIGHT
        if brightness > MODERATE_THRESHOLD:
            return Lighting.MODERATE
        return Lighting.DIM

    @staticmethod
    def dominant_color(frame: Optional[np.ndarray]) -> Tuple[int, int, int]:
        """Per-channel mean of a BGR frame, rounded, returned as (r, g, b)."""
        if frame is None or frame.size == 0 or frame.ndim != 3:
            return (0, 0, 0)
        blue, green, red = (int(round(float(v))) for v in frame.reshape(-1, frame.shape[2]).mean(axis=0)[:3])
        return (red, green, blue)

    @staticmethod
    def classify(
        detections: Sequence[Detection],
        frame: Optional[np.ndarray] = None,
    ) -> SceneClassification:
        return SceneClassification(
            scene_type=SceneClassifier.scene_type(detections),
            lighting=SceneClassifier.lighting(frame),
            dominant_color=SceneClassifier.dominant_color(frame),
        )

    @staticmethod
    def summarize(
        detections: Sequence[Detection],
        frame: Optional[np.ndarray] = None,
        captured_at_epoch_millis: Optional[int] = None,
    ) -> SceneSummary:
        """
        Build the SceneSummary handed to narration.

        Args:
            detections: Detector output, order preserved
            frame: Frame the detections came from (None → dim / black)
            captured_at_epoch_millis: Capture time; defaults to now
        """
        classification = SceneClassifier.classify(detections, frame)
        if captured_at_epoch_millis is None:
            captured_at_epoch_millis = int(time.time() * 1000)
        return SceneSummary(
            objects=tuple(detections or ()),
            scene_type=classification.scene_type,
            lighting=classification.lighting,
            dominant_color=classification.dominant_color,
            captured_at_epoch_millis=captured_at_epoch_millis,
        )
