"""
Voice command parsing.

Keyword matching on the lower-cased utterance, checked in a fixed order so
an utterance that mentions several keywords resolves to the first group.
"""

import re
from enum import Enum
from typing import Optional, Tuple


class VoiceCommand(str, Enum):
    DESCRIBE_SCENE = "describe_scene"
    READ_TEXT = "read_text"
    FIND_OBJECT = "find_object"
    NAVIGATE = "navigate"
    HELP = "help"
    SETTINGS = "settings"
    UNKNOWN = "unknown"


COMMAND_KEYWORDS: Tuple[Tuple[VoiceCommand, Tuple[str, ...]], ...] = (
    (VoiceCommand.DESCRIBE_SCENE, ("describe", "what", "see")),
    (VoiceCommand.READ_TEXT, ("read", "text")),
    (VoiceCommand.FIND_OBJECT, ("find", "where")),
    (VoiceCommand.NAVIGATE, ("navigate", "direction")),
    (VoiceCommand.HELP, ("help",)),
    (VoiceCommand.SETTINGS, ("settings", "options")),
)

_TARGET_PATTERN = re.compile(
    r"\b(?:find|where(?:'s|\s+is|\s+are)?|navigate\s+to|directions?\s+to)\s+"
    r"(?:the\s+|a\s+|an\s+|my\s+)?([a-z][a-z ]*?)\s*[?.!]?$"
)


def parse_command(utterance: str) -> VoiceCommand:
    text = (utterance or "").lower()
    for command, keywords in COMMAND_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return command
    return VoiceCommand.UNKNOWN


def extract_target(utterance: str) -> Optional[str]:
    """
    Object named after a find/navigate keyword.

    "Find the door" -> "door", "where is my chair?" -> "chair".
    """
    match = _TARGET_PATTERN.search((utterance or "").strip().lower())
    if not match:
        return None
    target = match.group(1).strip()
    return target or None
