"""
Data input
----------

Frame contract plus the capture devices that produce frames.
"""

from .data_models import FramePacket
from .camera_source import CaptureDevice, OpenCVCameraSource

__all__ = ["FramePacket", "CaptureDevice", "OpenCVCameraSource"]
