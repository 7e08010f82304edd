"""Output channel provider for dependency injection."""
import logging
from typing import TYPE_CHECKING

from ...application.output_sequencer import OutputSequencer
from ...core.config import Settings
from ...infrastructure.audio.speech_backend import LoggingSpeechBackend
from ...infrastructure.audio.voice_channel import VoiceChannel, VoiceSettings
from ...infrastructure.haptics.haptic_backend import LoggingHapticBackend
from ...infrastructure.haptics.haptic_channel import HapticChannel
from ...infrastructure.storage.preferences_store import UserPreferences

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class OutputProvider:
    """Output provider - voice channel, haptic channel and the sequencer over both"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)
        preferences = container.get(UserPreferences)

        voice = VoiceChannel(
            LoggingSpeechBackend(),
            VoiceSettings(
                rate=preferences.voice_rate,
                pitch=preferences.voice_pitch,
                language=settings.voice_language,
                volume=settings.voice_volume,
            ),
        )
        container.register_singleton(VoiceChannel, voice)

        haptics = HapticChannel(LoggingHapticBackend(), enabled=settings.haptics_enabled)
        container.register_singleton(HapticChannel, haptics)

        container.register_singleton(OutputSequencer, OutputSequencer(voice, haptics))

        logger.info("Registered output services (voice, haptics, sequencer)")
