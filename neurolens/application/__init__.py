from .orchestrator import CaptureOrchestrator
from .output_sequencer import OutputSequencer
from .voice_commands import VoiceCommand, parse_command

__all__ = ["CaptureOrchestrator", "OutputSequencer", "VoiceCommand", "parse_command"]
