# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    NarrationChainProvider,
    OrchestratorProvider,
    OutputProvider,
    PerceptionProvider,
    SettingsProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and saved preferences (SettingsProvider)
    2. Capture device, detector, text recognizer (PerceptionProvider)
    3. Voice and haptic channels (OutputProvider) - voice rate/pitch from preferences
    4. Narration chain (NarrationChainProvider) - cloud key/flag from preferences
    5. Orchestrator (OrchestratorProvider) - depends on all of the above
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        SettingsProvider.register(self)
        PerceptionProvider.register(self)
        OutputProvider.register(self)
        NarrationChainProvider.register(self)
        OrchestratorProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container; the next get_container() rebuilds it."""
    global _container
    _container = None
