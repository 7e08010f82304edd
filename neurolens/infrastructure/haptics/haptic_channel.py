"""
Haptic Channel
--------------

Plays static pulse tables in order, honoring each pulse's delay. Patterns are
serialized by a lock so two patterns never interleave; the voice channel's
state is never consulted.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import asyncio
import logging
from typing import Awaitable, Callable, Sequence

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ...core.exceptions import OutputError
from ...domain.constants.haptic_patterns import (
    DIRECTIONAL_PATTERNS,
    HAPTIC_PATTERNS,
    Direction,
    HapticIntensity,
    HapticPattern,
    HapticPulse,
)
from .haptic_backend import HapticBackend

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

MIN_DISTANCE_INTERVAL_MS = 100
MAX_DISTANCE_INTERVAL_MS = 1000


class HapticChannel:
    """Haptic output channel."""

    def __init__(self, backend: HapticBackend, enabled: bool = True, sleep: Sleep = asyncio.sleep):
        """
        Args:
            backend: Platform impact API
            enabled: When False every call is a no-op
            sleep: Delay coroutine (injected by tests)
        """
        self._backend = backend
        self.enabled = enabled
        self._sleep = sleep
        self._lock = asyncio.Lock()

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    async def trigger(self, pattern: HapticPattern) -> None:
        """Play a named pattern. Raises OutputError if the platform call fails."""
        await self._play(HAPTIC_PATTERNS[HapticPattern(pattern)], label=HapticPattern(pattern).value)

    async def directional_cue(self, direction: Direction) -> None:
        """Left: two quick pulses, right: three, forward: one strong, back: two slow."""
        await self._play(DIRECTIONAL_PATTERNS[Direction(direction)], label=f"direction:{Direction(direction).value}")

    async def distance_feedback(self, distance_meters: float) -> None:
        """Two light pulses; the closer the object, the shorter the gap."""
        interval = max(MIN_DISTANCE_INTERVAL_MS, min(MAX_DISTANCE_INTERVAL_MS, distance_meters * 200))
        pulses = (
            HapticPulse(HapticIntensity.LIGHT, int(interval)),
            HapticPulse(HapticIntensity.LIGHT),
        )
        await self._play(pulses, label="distance")

    async def _play(self, pulses: Sequence[HapticPulse], label: str) -> None:
        if not self.enabled:
            return
        async with self._lock:
            try:
                for pulse in pulses:
                    await self._backend.trigger_impact(pulse.intensity)
                    if pulse.delay_millis:
                        await self._sleep(pulse.delay_millis / 1000.0)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                raise OutputError(f"Haptic pattern '{label}' failed: {exc}", channel="haptic") from exc
