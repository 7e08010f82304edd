"""Fixed phrases spoken by the orchestrator"""

from typing import Dict

from ..models.modes import OperatingMode


class Phrases:
    """Spoken phrase constants"""
    MODE_CONFIRMATIONS: Dict[OperatingMode, str] = {
        OperatingMode.SCENE: "Scene description mode",
        OperatingMode.TEXT: "Text reading mode",
        OperatingMode.NAVIGATE: "Navigation mode",
    }

    READY = "NeuroLens is ready{suffix}. Tap anywhere to describe your surroundings"
    READY_CLOUD_SUFFIX = " with enhanced cloud mode"
    NO_TEXT = "No text detected"
    TEXT_FOUND = "Text found: {text}"
    VISION_UNAVAILABLE = "Vision service unavailable. Please check settings."
    ANALYSIS_FAILED = "Analysis failed. Please try again"
    HELP = (
        "Say describe to hear what is around you, read to read text, "
        "find or navigate followed by an object to get directions."
    )
    SETTINGS = "Settings are available in the companion app."
    UNKNOWN_COMMAND = "Sorry, I did not understand. Say help for options."
