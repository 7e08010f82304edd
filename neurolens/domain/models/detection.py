# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BoundingBox:
    """Box in normalized [0, 1] image coordinates, top-left origin."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Detection:
    """
    One object found by the detector in a single inference call.

    Detections are immutable and belong to the cycle that produced them;
    nothing persists them after narration has consumed them.
    """
    label: str
    confidence: float
    bounding_box: BoundingBox
    estimated_distance_meters: Optional[float] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("Detection confidence must be within [0, 1]")
