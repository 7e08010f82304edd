"""Platform speech contract and a headless implementation."""
import asyncio
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SpeechBackend(Protocol):
    """
    Platform text-to-speech.

    speak() returns when the utterance has finished and raises on a platform
    error. stop() interrupts the current utterance.
    """

    async def speak(self, text: str, rate: float, pitch: float, volume: float, language: str) -> None:
        ...

    async def stop(self) -> None:
        ...


class LoggingSpeechBackend:
    """
    Speech backend for headless deployments.

    Logs each utterance and holds for roughly the time it would take to say
    it, so queueing and preemption behave as they would on a device.
    """

    WORDS_PER_SECOND = 2.5

    def __init__(self, simulate_duration: bool = True):
        self.simulate_duration = simulate_duration

    def _duration_seconds(self, text: str, rate: float) -> float:
        words = max(1, len(text.split()))
        return words / (self.WORDS_PER_SECOND * max(rate, 0.1))

    async def speak(self, text: str, rate: float, pitch: float, volume: float, language: str) -> None:
        logger.info(f"🔊 [{language} rate={rate:.1f} pitch={pitch:.1f}] {text}")
        if self.simulate_duration:
            await asyncio.sleep(self._duration_seconds(text, rate))

    async def stop(self) -> None:
        logger.debug("Speech stopped")
