"""
Shared pytest fixtures for neurolens tests.

Fixtures wire the fakes in tests/fakes.py into real channels, sequencer
and orchestrator so every stage can be driven from a test.
"""
import os
from unittest.mock import patch

import pytest

from neurolens.application.narration.chain import NarrationFallbackChain
from neurolens.application.narration.template_provider import TemplateNarrationProvider
from neurolens.application.orchestrator import CaptureOrchestrator
from neurolens.application.output_sequencer import OutputSequencer
from neurolens.core.config import reset_settings
from neurolens.infrastructure.audio.voice_channel import VoiceChannel
from neurolens.infrastructure.haptics.haptic_channel import HapticChannel
from neurolens.processing.detections.detector import Detector
from tests.fakes import (
    FakeCamera,
    FakeModel,
    RecordingHapticBackend,
    RecordingSleep,
    RecordingSpeechBackend,
)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "NEUROLENS_CLOUD_ENABLED": "true",
        "NEUROLENS_CLOUD_API_KEY": "test-key-placeholder",
        "CAPTURE_INTERVAL_MS": "50",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def speech_backend():
    return RecordingSpeechBackend()


@pytest.fixture
def haptic_backend():
    return RecordingHapticBackend()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def sequencer(speech_backend, haptic_backend, recording_sleep):
    voice = VoiceChannel(speech_backend)
    haptics = HapticChannel(haptic_backend, sleep=recording_sleep)
    return OutputSequencer(voice, haptics)


@pytest.fixture
def camera():
    return FakeCamera()


@pytest.fixture
def model():
    return FakeModel()


@pytest.fixture
def orchestrator(camera, model, sequencer):
    chain = NarrationFallbackChain([TemplateNarrationProvider()])
    return CaptureOrchestrator(
        camera=camera,
        detector=Detector(model),
        chain=chain,
        sequencer=sequencer,
    )
