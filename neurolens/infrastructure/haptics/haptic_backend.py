"""Platform haptic contract and a headless implementation."""
import logging
from typing import Protocol

from ...domain.constants.haptic_patterns import HapticIntensity

logger = logging.getLogger(__name__)


class HapticBackend(Protocol):
    """Platform impact feedback. Raises if the platform API is unavailable."""

    async def trigger_impact(self, intensity: HapticIntensity) -> None:
        ...


class LoggingHapticBackend:
    """Haptic backend for headless deployments: logs each pulse."""

    async def trigger_impact(self, intensity: HapticIntensity) -> None:
        logger.debug(f"📳 haptic pulse: {intensity.value}")
