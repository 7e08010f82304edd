# Standard library imports
from dataclasses import dataclass
from typing import Optional

from .detection import BoundingBox


@dataclass(frozen=True)
class TextDetection:
    """One block of recognized text and where it sits in the frame."""
    text: str
    confidence: float
    bounding_box: BoundingBox
    language: Optional[str] = None
