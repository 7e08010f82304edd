"""
Narration models
----------------

Request and result types exchanged with the narration providers.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from .detection import Detection
from .scene import SceneSummary


class NarrationSource(str, Enum):
    CLOUD = "cloud"
    LOCAL = "local"


class NarrationKind(str, Enum):
    """What the narration is for. Only prompt and template text differ per kind."""
    SCENE = "scene"
    NAVIGATION = "navigation"
    QUESTION = "question"
    IMAGE = "image"


@dataclass(frozen=True)
class NarrationRequest:
    """
    Input for one pass through the fallback chain.

    Which fields are read depends on kind:
    - SCENE: summary, detected_text
    - NAVIGATION: target, detections, user_intent
    - QUESTION: question, summary, detected_text
    - IMAGE: frame (cloud vision only)
    """
    kind: NarrationKind
    summary: SceneSummary = field(default_factory=SceneSummary)
    detected_text: Optional[str] = None
    target: str = ""
    detections: Tuple[Detection, ...] = field(default_factory=tuple)
    user_intent: str = ""
    question: str = ""
    frame: Optional[Any] = None


@dataclass(frozen=True)
class NarrationResult:
    """
    Successful narration. Failures are raised, never returned as empty text.
    """
    text: str
    confidence: float
    source: NarrationSource
    latency_millis: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.text or not self.text.strip():
            raise ValueError("Narration text must be non-empty")
