"""Settings and saved preferences provider for dependency injection."""
import logging
from typing import TYPE_CHECKING

from ...core.config import Settings, get_settings
from ...infrastructure.storage.preferences_store import JsonPreferencesStore, UserPreferences

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class SettingsProvider:
    """Registers Settings, the preferences store and the preferences read at startup"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register settings and preferences.
        Preferences are read once here; later providers consume the loaded copy.
        """
        settings = get_settings()
        container.register_singleton(Settings, settings)

        store = JsonPreferencesStore(settings.preferences_path)
        container.register_singleton(JsonPreferencesStore, store)

        preferences = store.load()
        container.register_singleton(UserPreferences, preferences)

        logger.info(f"Registered settings (preferences from {store.path})")
