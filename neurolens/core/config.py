# Standard library imports
import os
from typing import Final, Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.

    The cloud credential has no built-in value: NEUROLENS_CLOUD_API_KEY is the
    documented default, and saved user preferences override it at startup.
    """

    def __init__(self) -> None:
        # Cloud narration (Mistral chat completions)
        self.cloud_enabled: Final[bool] = _env_bool("NEUROLENS_CLOUD_ENABLED", True)
        self.cloud_api_key: Final[str] = os.getenv("NEUROLENS_CLOUD_API_KEY", "")
        self.mistral_base_url: Final[str] = os.getenv(
            "MISTRAL_BASE_URL",
            "https://api.mistral.ai/v1"
        )
        self.mistral_text_model: Final[str] = os.getenv("MISTRAL_TEXT_MODEL", "mistral-small-latest")
        self.mistral_vision_model: Final[str] = os.getenv("MISTRAL_VISION_MODEL", "pixtral-12b-2409")
        self.cloud_temperature: Final[float] = float(os.getenv("CLOUD_TEMPERATURE", "0.7"))
        self.cloud_max_tokens: Final[int] = int(os.getenv("CLOUD_MAX_TOKENS", "500"))
        self.cloud_timeout_seconds: Final[float] = float(os.getenv("CLOUD_TIMEOUT_SECONDS", "8.0"))
        if self.cloud_timeout_seconds <= 0:
            raise ValueError("CLOUD_TIMEOUT_SECONDS must be positive")

        # Capture loop
        self.capture_interval_ms: Final[int] = int(os.getenv("CAPTURE_INTERVAL_MS", "2000"))
        self.camera_source: Final[str] = os.getenv("CAMERA_SOURCE", "0")
        self.navigation_target: Final[str] = os.getenv("NAVIGATION_TARGET", "door")

        # Detector model (OpenCV DNN, SSD MobileNet graph)
        self.detector_model_path: Final[str] = os.getenv(
            "DETECTOR_MODEL_PATH",
            "./models/ssd_mobilenet_v2/frozen_inference_graph.pb"
        )
        self.detector_config_path: Final[str] = os.getenv(
            "DETECTOR_CONFIG_PATH",
            "./models/ssd_mobilenet_v2/ssd_mobilenet_v2.pbtxt"
        )
        self.detector_input_size: Final[int] = int(os.getenv("DETECTOR_INPUT_SIZE", "300"))

        # Output channels
        self.voice_language: Final[str] = os.getenv("VOICE_LANGUAGE", "en-US")
        self.voice_volume: Final[float] = float(os.getenv("VOICE_VOLUME", "1.0"))
        self.haptics_enabled: Final[bool] = _env_bool("HAPTICS_ENABLED", True)

        # Persisted user preferences (cloud flag, key, voice rate/pitch)
        self.preferences_path: Final[str] = os.getenv(
            "PREFERENCES_PATH",
            os.path.join(os.path.expanduser("~"), ".neurolens", "preferences.json")
        )

        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
