"""Narration chain provider for dependency injection."""
import logging
from typing import TYPE_CHECKING

from ...application.narration.chain import NarrationFallbackChain
from ...application.narration.cloud_provider import CloudNarrationProvider
from ...application.narration.template_provider import TemplateNarrationProvider
from ...core.config import Settings
from ...infrastructure.external.mistral_client import MistralChatClient
from ...infrastructure.http_client_factory import get_shared_http_client
from ...infrastructure.storage.preferences_store import UserPreferences

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class NarrationChainProvider:
    """Narration provider - cloud client, providers in order, and the fallback chain"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the narration chain.
        Saved preferences override the environment for the cloud key and toggle.
        """
        settings = container.get(Settings)
        preferences = container.get(UserPreferences)

        api_key = preferences.cloud_api_key or settings.cloud_api_key
        enabled = settings.cloud_enabled if preferences.cloud_enabled is None else preferences.cloud_enabled

        client = MistralChatClient(
            api_key=api_key,
            base_url=settings.mistral_base_url,
            temperature=settings.cloud_temperature,
            max_tokens=settings.cloud_max_tokens,
            http_client=get_shared_http_client(),
        )
        container.register_singleton(MistralChatClient, client)

        cloud = CloudNarrationProvider(
            client,
            text_model=settings.mistral_text_model,
            vision_model=settings.mistral_vision_model,
            enabled=enabled,
        )
        container.register_singleton(CloudNarrationProvider, cloud)

        chain = NarrationFallbackChain(
            [cloud, TemplateNarrationProvider()],
            timeout_seconds=settings.cloud_timeout_seconds,
        )
        container.register_singleton(NarrationFallbackChain, chain)

        logger.info(f"Registered narration chain (cloud_available={cloud.is_available()})")
