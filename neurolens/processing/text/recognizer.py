"""
Text Recognition
----------------

Contract for the text-recognition collaborator, the current stub, and the
post-processing helpers used to read recognized text aloud.

StubTextRecognizer always returns an empty list. An empty result is a valid
answer ("no text"), not an error.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import functools
import logging
from typing import List, Protocol, Sequence

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
import numpy as np

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ...domain.models.text import TextDetection

logger = logging.getLogger(__name__)

# Boxes whose tops differ by less than this (normalized units) share a line.
LINE_TOLERANCE = 0.02


class TextRecognizer(Protocol):
    """Interface for text recognition."""

    async def recognize_text(self, frame: np.ndarray) -> List[TextDetection]:
        ...


class StubTextRecognizer:
    """
    Placeholder recognizer.

    No on-device text model is wired in yet, so every call returns [].
    """

    async def recognize_text(self, frame: np.ndarray) -> List[TextDetection]:
        logger.debug("StubTextRecognizer: no text model configured, returning no detections")
        return []


def _reading_order(a: TextDetection, b: TextDetection) -> int:
    y_diff = a.bounding_box.y - b.bounding_box.y
    if abs(y_diff) > LINE_TOLERANCE:
        return -1 if y_diff < 0 else 1
    x_diff = a.bounding_box.x - b.bounding_box.x
    if x_diff == 0:
        return 0
    return -1 if x_diff < 0 else 1


def organize_text_for_reading(detections: Sequence[TextDetection]) -> str:
    """Join detections in reading order: top to bottom, then left to right within a line."""
    ordered = sorted(detections, key=functools.cmp_to_key(_reading_order))
    return " ".join(d.text.strip() for d in ordered if d.text and d.text.strip())
