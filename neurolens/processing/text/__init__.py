from .recognizer import (
    TextRecognizer,
    StubTextRecognizer,
    organize_text_for_reading,
)

__all__ = [
    "TextRecognizer",
    "StubTextRecognizer",
    "organize_text_for_reading",
]
