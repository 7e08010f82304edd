"""
Custom exception hierarchy for NeuroLens.

Every error raised by the perception and output stages inherits from
NeuroLensError and carries a user-facing message that the orchestrator can
speak. Which errors are spoken and which are swallowed is decided by the
orchestrator, not here.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class NeuroLensError(Exception):
    """Base exception for all NeuroLens errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "Analysis failed. Please try again"
        self.details = details or {}


# -----------------------------------------------------------------------------
# Perception
# -----------------------------------------------------------------------------


class CaptureError(NeuroLensError):
    """Raised when the capture device has no permission or is busy."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Camera is not available. Please check camera permission.")
        super().__init__(message, **kwargs)


class InferenceError(NeuroLensError):
    """Raised when the detection model is unavailable or the frame is malformed."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Vision service unavailable. Please check settings.")
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Narration
# -----------------------------------------------------------------------------


class ProviderError(NeuroLensError):
    """Raised by a narration provider that could not produce a result."""

    def __init__(self, message: str, provider: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.provider = provider


class CloudNarrationError(ProviderError):
    """Network, HTTP status, timeout or malformed-body failure of the cloud path."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        kwargs.setdefault("provider", "cloud")
        super().__init__(message, **kwargs)
        self.status_code = status_code


class NarrationUnavailableError(NeuroLensError):
    """Raised when every provider in a chain declined or failed."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Scene analysis failed. Please check your connection.")
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------


class OutputError(NeuroLensError):
    """Speech or haptic platform failure. Logged and swallowed by the sequencer."""

    def __init__(self, message: str, channel: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.channel = channel
