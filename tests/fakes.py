"""Fakes for the platform edges: camera, detector model, speech and haptic hardware."""
import asyncio
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from neurolens.domain.constants.coco_labels import COCO_LABELS
from neurolens.processing.data_input.data_models import FramePacket


class RecordingSpeechBackend:
    """
    Records utterances in the order they start.

    With hold=True each utterance blocks until release() is called, which
    lets tests observe the channel while it is speaking.
    """

    def __init__(self, hold: bool = False):
        self.hold = hold
        self.spoken: List[str] = []
        self.finished: List[str] = []
        self.stop_calls = 0
        self.fail_on: Optional[str] = None
        self._gate = asyncio.Event()

    async def speak(self, text: str, rate: float, pitch: float, volume: float, language: str) -> None:
        self.spoken.append(text)
        if self.fail_on is not None and text == self.fail_on:
            raise RuntimeError("speech engine crashed")
        if self.hold:
            await self._gate.wait()
            self._gate.clear()
        self.finished.append(text)

    async def stop(self) -> None:
        self.stop_calls += 1

    def release(self) -> None:
        self._gate.set()


class RecordingHapticBackend:
    def __init__(self):
        self.impacts: List[Any] = []
        self.fail = False

    async def trigger_impact(self, intensity) -> None:
        if self.fail:
            raise RuntimeError("vibration motor unavailable")
        self.impacts.append(intensity)


class RecordingSleep:
    """Drop-in for asyncio.sleep that records delays and yields once."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        await asyncio.sleep(0)


class FakeCamera:
    def __init__(self, frame: Optional[np.ndarray] = None):
        self.frame = frame if frame is not None else np.full((60, 80, 3), 128, dtype=np.uint8)
        self.error: Optional[Exception] = None
        self.calls = 0
        self.gate: Optional[asyncio.Event] = None
        self.entered = asyncio.Event()

    async def capture_frame(self) -> FramePacket:
        self.calls += 1
        self.entered.set()
        # OpenCVCameraSource reads in a worker thread, so a capture always suspends.
        await asyncio.sleep(0)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return FramePacket(frame=self.frame, frame_index=self.calls, captured_at_epoch_millis=1_700_000_000_000)


class FakeModel:
    """DetectionModel returning a fixed set of (label, score, (y1, x1, y2, x2)) rows."""

    def __init__(self, rows: Sequence[Tuple[str, float, Tuple[float, float, float, float]]] = ()):
        self.rows = list(rows)
        self.error: Optional[Exception] = None

    def __call__(self, frame: np.ndarray) -> Dict[str, Any]:
        if self.error is not None:
            raise self.error
        return {
            "detection_boxes": np.array([[list(box) for _, _, box in self.rows]], dtype=np.float32).reshape(1, -1, 4),
            "detection_scores": np.array([[score for _, score, _ in self.rows]], dtype=np.float32),
            "detection_classes": np.array([[COCO_LABELS.index(label) for label, _, _ in self.rows]], dtype=np.float32),
        }

