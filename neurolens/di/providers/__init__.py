from .settings_provider import SettingsProvider
from .perception_provider import PerceptionProvider
from .output_provider import OutputProvider
from .narration_provider import NarrationChainProvider
from .orchestrator_provider import OrchestratorProvider


__all__ = [
    "SettingsProvider",
    "PerceptionProvider",
    "OutputProvider",
    "NarrationChainProvider",
    "OrchestratorProvider",
]
