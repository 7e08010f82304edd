from .detection import BoundingBox, Detection
from .scene import SceneType, Lighting, SceneClassification, SceneSummary
from .narration import NarrationSource, NarrationKind, NarrationRequest, NarrationResult
from .modes import OperatingMode, CycleKind, CycleReport
from .text import TextDetection

__all__ = [
    "BoundingBox",
    "Detection",
    "SceneType",
    "Lighting",
    "SceneClassification",
    "SceneSummary",
    "NarrationSource",
    "NarrationKind",
    "NarrationRequest",
    "NarrationResult",
    "OperatingMode",
    "CycleKind",
    "CycleReport",
    "TextDetection",
]
