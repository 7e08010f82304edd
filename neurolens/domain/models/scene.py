"""
Scene models
------------

Output of the scene classifier and the summary handed to narration.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from .detection import Detection

RGB = Tuple[int, int, int]


class SceneType(str, Enum):
    STREET = "street"
    OUTDOOR = "outdoor"
    INDOOR = "indoor"
    UNKNOWN = "unknown"


class Lighting(str, Enum):
    BRIGHT = "bright"
    MODERATE = "moderate"
    DIM = "dim"


@dataclass(frozen=True)
class SceneClassification:
    """(scene type, lighting, dominant color) for one frame."""
    scene_type: SceneType = SceneType.UNKNOWN
    lighting: Lighting = Lighting.DIM
    dominant_color: RGB = (0, 0, 0)


@dataclass(frozen=True)
class SceneSummary:
    """
    Normalized, classifier-annotated output of one detection cycle.

    objects keeps the detector's output order and is never None (an empty
    tuple when nothing was found). scene_type and lighting always resolve,
    falling back to unknown / dim.
    """
    objects: Tuple[Detection, ...] = field(default_factory=tuple)
    scene_type: SceneType = SceneType.UNKNOWN
    lighting: Lighting = Lighting.DIM
    dominant_color: RGB = (0, 0, 0)
    captured_at_epoch_millis: int = 0

    def __post_init__(self) -> None:
        # Accept lists from callers but store an immutable tuple.
        if self.objects is None:
            object.__setattr__(self, "objects", ())
        elif not isinstance(self.objects, tuple):
            object.__setattr__(self, "objects", tuple(self.objects))
        if self.scene_type is None:
            object.__setattr__(self, "scene_type", SceneType.UNKNOWN)
        if self.lighting is None:
            object.__setattr__(self, "lighting", Lighting.DIM)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(detection.label for detection in self.objects)
