"""
Frame data contracts
--------------------

Defines the packet passed from the capture device to the detector.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
import numpy as np

# -----------------------------------------------------------------------------
# Data contracts
# -----------------------------------------------------------------------------


@dataclass
class FramePacket:
    """
    One frame plus metadata, passed from the capture device to the pipeline.

    The detector and classifier read frame; captured_at_epoch_millis stamps
    the scene summary.
    """

    frame: np.ndarray                  # BGR image (H, W, 3)
    frame_index: int                   # Sequential index from the device
    captured_at_epoch_millis: int      # Wall-clock capture time
    source_id: Optional[str] = None    # Device index or path

    def __post_init__(self) -> None:
        """Validate shape and type of frame."""
        if self.frame is None:
            raise ValueError("Frame cannot be None")
        if not isinstance(self.frame, np.ndarray):
            raise ValueError("Frame must be a numpy array")
        if len(self.frame.shape) != 3 or self.frame.shape[2] != 3:
            raise ValueError("Frame must be a 3-channel BGR image (H, W, 3)")
