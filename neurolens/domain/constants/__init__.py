"""Static configuration: label table, haptic pulse tables and spoken phrases"""

from .coco_labels import COCO_LABELS, UNKNOWN_LABEL, label_for_class
from .haptic_patterns import (
    HapticIntensity,
    HapticPattern,
    HapticPulse,
    Direction,
    HAPTIC_PATTERNS,
    DIRECTIONAL_PATTERNS,
)
from .phrases import Phrases

__all__ = [
    "COCO_LABELS",
    "UNKNOWN_LABEL",
    "label_for_class",
    "HapticIntensity",
    "HapticPattern",
    "HapticPulse",
    "Direction",
    "HAPTIC_PATTERNS",
    "DIRECTIONAL_PATTERNS",
    "Phrases",
]
