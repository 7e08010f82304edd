from .preferences_store import UserPreferences, JsonPreferencesStore

__all__ = ["UserPreferences", "JsonPreferencesStore"]
