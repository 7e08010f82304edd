"""Haptic output: platform impact contract and the pattern sequencer."""

from .haptic_backend import HapticBackend, LoggingHapticBackend
from .haptic_channel import HapticChannel

__all__ = ["HapticBackend", "LoggingHapticBackend", "HapticChannel"]
