"""Key-value persistence of user preferences (cloud flag, key, voice rate/pitch)."""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class UserPreferences(BaseModel):
    """Preferences written by the settings surface and read once at startup."""
    cloud_enabled: Optional[bool] = None
    cloud_api_key: Optional[str] = None
    voice_rate: float = Field(default=1.0, ge=0.5, le=2.0)
    voice_pitch: float = Field(default=1.0, ge=0.5, le=2.0)


class JsonPreferencesStore:
    """
    Preferences stored as a single JSON document.

    A missing file yields defaults. An unreadable or invalid file is logged
    and also yields defaults, so a bad settings write never blocks startup.
    """

    def __init__(self, path: str):
        self.path = Path(path).expanduser()

    def load(self) -> UserPreferences:
        if not self.path.is_file():
            logger.info(f"No saved preferences at {self.path}; using defaults")
            return UserPreferences()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return UserPreferences.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {exc}")
            return UserPreferences()

    def save(self, preferences: UserPreferences) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved preferences to {self.path}")
