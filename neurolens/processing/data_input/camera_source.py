"""
Camera Source
-------------

Captures single frames on demand from a camera index or stream/file path.
Reads run in a worker thread so the event loop keeps serving other work while
the device is busy.
"""

import asyncio
import logging
import time
from typing import Optional, Protocol

import cv2

from ...core.exceptions import CaptureError
from .data_models import FramePacket

logger = logging.getLogger(__name__)


class CaptureDevice(Protocol):
    """Interface for capture devices. The orchestrator only needs capture_frame()."""

    async def capture_frame(self) -> FramePacket:
        """Return the next frame or raise CaptureError."""
        ...


class OpenCVCameraSource:
    """
    Capture device backed by cv2.VideoCapture.

    The device is opened lazily on first capture. A capture that cannot open
    the device or read a frame raises CaptureError; the next capture retries
    the open.
    """

    def __init__(self, source: str = "0"):
        """
        Initialize camera source.

        Args:
            source: Camera index ("0") or a stream URL / video path.
        """
        self.source = (source or "0").strip()
        self._cap: Optional["cv2.VideoCapture"] = None
        self._frame_index = 0

    def _open(self) -> "cv2.VideoCapture":
        target = int(self.source) if self.source.isdigit() else self.source
        cap = cv2.VideoCapture(target)
        if not cap.isOpened():
            cap.release()
            raise CaptureError(
                f"Could not open capture source: {self.source}",
                details={"source": self.source},
            )
        logger.info(f"Opened capture source {self.source}")
        return cap

    def _read_blocking(self) -> FramePacket:
        if self._cap is None:
            self._cap = self._open()
        ret, frame = self._cap.read()
        if not ret or frame is None:
            self.close()
            raise CaptureError(
                f"Capture source {self.source} returned no frame (device busy or no permission)",
                details={"source": self.source},
            )
        if len(frame.shape) == 2:
            frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
        elif frame.shape[2] == 4:
            frame = cv2.cvtColor(frame, cv2.COLOR_BGRA2BGR)
        packet = FramePacket(
            frame=frame,
            frame_index=self._frame_index,
            captured_at_epoch_millis=int(time.time() * 1000),
            source_id=self.source,
        )
        self._frame_index += 1
        return packet

    async def capture_frame(self) -> FramePacket:
        """Capture one frame. Raises CaptureError if the device is unavailable."""
        return await asyncio.to_thread(self._read_blocking)

    def close(self) -> None:
        """Release the capture device."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None
