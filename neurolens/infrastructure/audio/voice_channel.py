"""
Voice Channel
-------------

Serializes spoken output. One utterance plays at a time; non-priority text
that arrives while speaking waits in a FIFO queue; priority text interrupts
the current utterance and discards the queue.

Utterance completion is awaited inside a drain task. When an utterance ends
(successfully or with a platform error) the next queued entry is spoken.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import asyncio
import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ...core.exceptions import OutputError
from .speech_backend import SpeechBackend

logger = logging.getLogger(__name__)

MIN_RATE, MAX_RATE = 0.5, 2.0
MIN_PITCH, MAX_PITCH = 0.5, 2.0


@dataclass
class VoiceSettings:
    rate: float = 1.0       # 0.5 to 2.0
    pitch: float = 1.0      # 0.5 to 2.0
    language: str = "en-US"
    volume: float = 1.0     # 0.0 to 1.0

    def __post_init__(self) -> None:
        """Range validations"""
        if not MIN_RATE <= self.rate <= MAX_RATE:
            raise ValueError(f"Voice rate must be within [{MIN_RATE}, {MAX_RATE}]")
        if not MIN_PITCH <= self.pitch <= MAX_PITCH:
            raise ValueError(f"Voice pitch must be within [{MIN_PITCH}, {MAX_PITCH}]")
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError("Voice volume must be within [0, 1]")


@dataclass(frozen=True)
class SpeechQueueEntry:
    text: str
    enqueued_at_epoch_millis: int


class VoiceChannel:
    """
    Voice output channel.

    State is an "is speaking" flag, the running drain task and the pending
    queue. submit() mutates that state synchronously so callers outside a
    coroutine (mode switches) can still hand text over in order.
    """

    def __init__(self, backend: SpeechBackend, settings: Optional[VoiceSettings] = None):
        self._backend = backend
        self.settings = settings or VoiceSettings()
        self._is_speaking = False
        self._queue: Deque[SpeechQueueEntry] = deque()
        self._task: Optional[asyncio.Task] = None
        self._current_text: Optional[str] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def is_speaking(self) -> bool:
        return self._is_speaking

    @property
    def current_text(self) -> Optional[str]:
        return self._current_text

    @property
    def pending(self) -> List[str]:
        return [entry.text for entry in self._queue]

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def submit(self, text: str, priority: bool = False) -> bool:
        """
        Hand text to the channel without waiting for it to be spoken.

        Must be called with a running event loop.

        Returns:
            True if the text starts speaking now, False if it was queued
        """
        if not text or not text.strip():
            return False

        if priority:
            interrupted = self._cancel_current()
            self._queue.clear()
            self._start(text, interrupt=interrupted)
            return True

        if self._is_speaking:
            self._queue.append(SpeechQueueEntry(text=text, enqueued_at_epoch_millis=int(time.time() * 1000)))
            logger.debug(f"Queued speech ({len(self._queue)} pending): {text}")
            return False

        self._start(text, interrupt=False)
        return True

    async def speak(self, text: str, priority: bool = False) -> bool:
        """Coroutine form of submit()."""
        return self.submit(text, priority)

    async def stop(self) -> None:
        """Stop the current utterance and drop everything queued."""
        self._queue.clear()
        if self._cancel_current():
            await self._stop_backend()

    async def wait_until_idle(self) -> None:
        """Wait until the current utterance and the whole queue have been spoken."""
        while self._task is not None:
            task = self._task
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                if task is self._task:
                    raise

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _start(self, text: str, interrupt: bool) -> None:
        self._is_speaking = True
        self._current_text = text
        self._task = asyncio.get_running_loop().create_task(self._drain(text, interrupt))

    def _cancel_current(self) -> bool:
        task = self._task
        self._task = None
        self._is_speaking = False
        self._current_text = None
        if task is None or task.done():
            return False
        task.cancel()
        return True

    async def _stop_backend(self) -> None:
        try:
            await self._backend.stop()
        except Exception as exc:
            logger.error(f"Speech stop failed: {exc}")

    async def _drain(self, text: str, interrupt: bool) -> None:
        me = asyncio.current_task()
        try:
            if interrupt:
                await self._stop_backend()
            next_text: Optional[str] = text
            while next_text is not None:
                self._current_text = next_text
                await self._utter(next_text)
                next_text = self._queue.popleft().text if self._queue else None
        finally:
            if self._task is me:
                self._task = None
                self._is_speaking = False
                self._current_text = None

    async def _utter(self, text: str) -> None:
        settings = self.settings
        try:
            await self._backend.speak(
                text,
                rate=settings.rate,
                pitch=settings.pitch,
                volume=settings.volume,
                language=settings.language,
            )
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            error = OutputError(f"Speech failed: {exc}", channel="voice")
            logger.error(error.message)
