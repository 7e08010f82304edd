"""Shared HTTP client for the cloud narration path."""
import httpx
import logging
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)

# Created on first use, closed by the application lifespan
_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Get or create the pooled async client used for Mistral requests.

    Keep-alive connections survive between capture cycles. The client-level
    timeout matches CLOUD_TIMEOUT_SECONDS; the narration chain applies its
    own, usually tighter, bound per call.

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None:
        settings = get_settings()
        _shared_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.cloud_timeout_seconds, connect=5.0),
            limits=httpx.Limits(
                max_keepalive_connections=2,
                max_connections=4,
                keepalive_expiry=60.0,
            ),
            http2=True,
        )
        logger.info(f"Created shared HTTP client (timeout={settings.cloud_timeout_seconds}s)")

    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared client on application shutdown."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
