"""
Unit tests for the stub recognizer and reading-order post-processing.
"""
import numpy as np
import pytest

from neurolens.domain.models.detection import BoundingBox
from neurolens.domain.models.text import TextDetection
from neurolens.processing.text import (
    StubTextRecognizer,
    organize_text_for_reading,
)


def _text(text, x, y, confidence=0.9):
    return TextDetection(text, confidence, BoundingBox(x, y, 0.2, 0.05))


class TestReadingOrder:
    def test_top_to_bottom_then_left_to_right(self):
        detections = [
            _text("world", 0.5, 0.30),
            _text("Hello", 0.1, 0.31),
            _text("Heading", 0.3, 0.05),
        ]
        assert organize_text_for_reading(detections) == "Heading Hello world"

    def test_rows_further_apart_than_tolerance_are_separate_lines(self):
        detections = [_text("second", 0.0, 0.20), _text("first", 0.9, 0.10)]
        assert organize_text_for_reading(detections) == "first second"

    def test_blank_entries_skipped(self):
        detections = [_text("  OPEN ", 0.1, 0.1), _text("   ", 0.5, 0.1)]
        assert organize_text_for_reading(detections) == "OPEN"

    def test_empty_input(self):
        assert organize_text_for_reading([]) == ""


class TestStubRecognizer:
    @pytest.mark.asyncio
    async def test_returns_no_detections(self):
        recognizer = StubTextRecognizer()
        assert await recognizer.recognize_text(np.zeros((4, 4, 3), dtype=np.uint8)) == []
