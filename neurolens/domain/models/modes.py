"""
Operating modes and cycle reports
---------------------------------

Exactly one OperatingMode is active at a time and it only changes through an
explicit switch. CycleReport describes what a trigger did.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OperatingMode(str, Enum):
    SCENE = "scene"
    TEXT = "text"
    NAVIGATE = "navigate"


class CycleKind(str, Enum):
    """Silent cycles come from the periodic timer; vocal cycles from the user."""
    SILENT = "silent"
    VOCAL = "vocal"


@dataclass(frozen=True)
class CycleReport:
    kind: CycleKind
    mode: OperatingMode
    executed: bool
    announced_text: Optional[str] = None
    detections: int = 0
    error: Optional[str] = None
