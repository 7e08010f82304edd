"""Voice output: platform speech contract and the queued voice channel."""

from .speech_backend import SpeechBackend, LoggingSpeechBackend
from .voice_channel import VoiceChannel, VoiceSettings, SpeechQueueEntry

__all__ = [
    "SpeechBackend",
    "LoggingSpeechBackend",
    "VoiceChannel",
    "VoiceSettings",
    "SpeechQueueEntry",
]
