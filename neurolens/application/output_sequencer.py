"""
Output Sequencer
----------------

Composes the voice and haptic channels behind one announce() call.

The channels are independent: a haptic pattern plays while speech is in
progress, and each channel serializes only its own output. A failure in
either channel is logged here and never reaches the caller.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import asyncio
import logging
from typing import Optional, Set

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ..domain.constants.haptic_patterns import Direction, HapticPattern
from ..infrastructure.audio.voice_channel import VoiceChannel
from ..infrastructure.haptics.haptic_channel import HapticChannel

logger = logging.getLogger(__name__)


def navigation_phrase(direction: str, object_label: str, distance_meters: float) -> str:
    """'<object> very close | N meters | far ahead, <direction>'"""
    if distance_meters < 1:
        distance_text = "very close"
    elif distance_meters < 3:
        distance_text = f"{int(round(distance_meters))} meters"
    else:
        distance_text = "far ahead"
    return f"{object_label} {distance_text}, {direction}"


class OutputSequencer:
    """Owns the voice and haptic channels."""

    def __init__(self, voice: VoiceChannel, haptics: HapticChannel):
        self.voice = voice
        self.haptics = haptics
        self._background: Set[asyncio.Task] = set()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def announce(
        self,
        text: Optional[str],
        haptic_pattern: Optional[HapticPattern] = None,
        priority: bool = False,
    ) -> None:
        """
        Speak *text* and play *haptic_pattern* concurrently.

        Args:
            text: Text to speak (None or empty → haptic only)
            haptic_pattern: Pattern to play (None → voice only)
            priority: Interrupt current speech and discard queued speech
        """
        await asyncio.gather(
            self.speak(text, priority),
            self.haptic(haptic_pattern),
        )

    def announce_nowait(
        self,
        text: Optional[str],
        haptic_pattern: Optional[HapticPattern] = None,
        priority: bool = False,
    ) -> None:
        """
        Synchronous announce for callers that cannot await.

        The speech is handed to the voice channel before this returns; the
        haptic pattern is scheduled on the running loop.
        """
        if text:
            try:
                self.voice.submit(text, priority)
            except Exception as exc:
                logger.error(f"Voice output failed: {exc}")
        if haptic_pattern is not None:
            task = asyncio.get_running_loop().create_task(self.haptic(haptic_pattern))
            self._background.add(task)
            task.add_done_callback(self._background.discard)

    async def speak(self, text: Optional[str], priority: bool = False) -> None:
        if not text:
            return
        try:
            await self.voice.speak(text, priority)
        except Exception as exc:
            logger.error(f"Voice output failed: {exc}")

    async def haptic(self, pattern: Optional[HapticPattern]) -> None:
        if pattern is None:
            return
        try:
            await self.haptics.trigger(pattern)
        except Exception as exc:
            logger.error(f"Haptic output failed: {exc}")

    async def announce_navigation(
        self,
        direction: Direction,
        object_label: str,
        distance_meters: float,
        priority: bool = True,
    ) -> None:
        """Navigation phrase spoken together with the matching directional pulse pattern."""
        text = navigation_phrase(Direction(direction).value, object_label, distance_meters)
        await asyncio.gather(self.speak(text, priority), self.cue_direction(direction))

    async def cue_direction(self, direction: Direction) -> None:
        try:
            await self.haptics.directional_cue(Direction(direction))
        except Exception as exc:
            logger.error(f"Haptic output failed: {exc}")

    async def cue_distance(self, distance_meters: float) -> None:
        try:
            await self.haptics.distance_feedback(distance_meters)
        except Exception as exc:
            logger.error(f"Haptic output failed: {exc}")

    async def stop(self) -> None:
        """Silence speech and wait for scheduled haptic patterns to finish."""
        await self.voice.stop()
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)

    async def wait_until_idle(self) -> None:
        if self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)
        await self.voice.wait_until_idle()
