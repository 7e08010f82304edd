"""
Haptic pulse tables
-------------------

Every pattern is a fixed, ordered sequence of (intensity, delay) pulses.
The haptic channel iterates these uniformly; nothing mutates them at runtime.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class HapticIntensity(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    SUCCESS = "success"
    ERROR = "error"


class HapticPattern(str, Enum):
    OBJECT_DETECTED = "object_detected"
    TEXT_FOUND = "text_found"
    NAVIGATION_CUE = "navigation_cue"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    FORWARD = "forward"
    BACK = "back"


@dataclass(frozen=True)
class HapticPulse:
    intensity: HapticIntensity
    delay_millis: int = 0


_LIGHT = HapticIntensity.LIGHT
_MEDIUM = HapticIntensity.MEDIUM

HAPTIC_PATTERNS: Mapping[HapticPattern, Tuple[HapticPulse, ...]] = MappingProxyType({
    HapticPattern.OBJECT_DETECTED: (HapticPulse(_LIGHT),),
    HapticPattern.TEXT_FOUND: (HapticPulse(_LIGHT, 100), HapticPulse(_LIGHT)),
    HapticPattern.NAVIGATION_CUE: (HapticPulse(_MEDIUM),),
    HapticPattern.WARNING: (
        HapticPulse(_MEDIUM, 150),
        HapticPulse(_MEDIUM, 150),
        HapticPulse(_MEDIUM, 150),
    ),
    HapticPattern.SUCCESS: (HapticPulse(HapticIntensity.SUCCESS),),
    HapticPattern.ERROR: (HapticPulse(HapticIntensity.ERROR),),
})

DIRECTIONAL_PATTERNS: Mapping[Direction, Tuple[HapticPulse, ...]] = MappingProxyType({
    Direction.LEFT: (HapticPulse(_LIGHT, 50), HapticPulse(_LIGHT)),
    Direction.RIGHT: (
        HapticPulse(_LIGHT, 50),
        HapticPulse(_LIGHT, 50),
        HapticPulse(_LIGHT, 50),
    ),
    Direction.FORWARD: (HapticPulse(HapticIntensity.HEAVY),),
    Direction.BACK: (HapticPulse(_MEDIUM, 200), HapticPulse(_MEDIUM)),
})
