from .config import Settings, get_settings, reset_settings
from .exceptions import (
    NeuroLensError,
    CaptureError,
    InferenceError,
    ProviderError,
    CloudNarrationError,
    NarrationUnavailableError,
    OutputError,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "NeuroLensError",
    "CaptureError",
    "InferenceError",
    "ProviderError",
    "CloudNarrationError",
    "NarrationUnavailableError",
    "OutputError",
]
