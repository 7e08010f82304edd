"""
Unit tests for JSON preference persistence.
"""
import json

from neurolens.infrastructure.storage.preferences_store import JsonPreferencesStore, UserPreferences


class TestJsonPreferencesStore:
    def test_missing_file_gives_defaults(self, tmp_path):
        prefs = JsonPreferencesStore(str(tmp_path / "absent.json")).load()
        assert prefs == UserPreferences()
        assert prefs.cloud_enabled is None
        assert prefs.cloud_api_key is None

    def test_invalid_json_gives_defaults(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonPreferencesStore(str(path)).load() == UserPreferences()

    def test_out_of_range_value_gives_defaults(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"voice_rate": 9.0}), encoding="utf-8")
        assert JsonPreferencesStore(str(path)).load().voice_rate == 1.0

    def test_save_then_load(self, tmp_path):
        store = JsonPreferencesStore(str(tmp_path / "nested" / "prefs.json"))
        store.save(UserPreferences(cloud_enabled=False, cloud_api_key="user-key", voice_rate=1.25))

        loaded = store.load()
        assert loaded.cloud_enabled is False
        assert loaded.cloud_api_key == "user-key"
        assert loaded.voice_rate == 1.25
        assert loaded.voice_pitch == 1.0
