"""
Narration Fallback Chain
------------------------

Walks an ordered provider list until one succeeds:

    Start -> TryCloud -> (Success | TryLocal) -> Done

A provider is skipped when it reports itself unavailable or does not handle
the request kind. Any failure, including the caller's timeout, is logged and
the chain moves on; it never retries a provider and never re-raises a
provider's error. Chains that end with the template provider always return
a result for scene, navigation and question requests.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import numpy as np

from ...core.exceptions import NarrationUnavailableError, ProviderError
from ...domain.models.detection import Detection
from ...domain.models.narration import NarrationKind, NarrationRequest, NarrationResult, NarrationSource
from ...domain.models.scene import SceneSummary
from .base import NarrationProvider

logger = logging.getLogger(__name__)


class NarrationFallbackChain:
    def __init__(self, providers: Sequence[NarrationProvider], timeout_seconds: float = 8.0) -> None:
        if not providers:
            raise ValueError("A narration chain needs at least one provider")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self.providers: List[NarrationProvider] = list(providers)
        self.timeout_seconds = timeout_seconds

    def cloud_available(self) -> bool:
        return any(p.is_available() for p in self.providers if p.source == NarrationSource.CLOUD)

    async def generate(
        self,
        request: NarrationRequest,
        timeout_seconds: Optional[float] = None,
    ) -> NarrationResult:
        """
        Run *request* through the providers in order.

        Args:
            request: What to narrate
            timeout_seconds: Upper bound for each cloud provider call; defaults
                to the chain's configured timeout. Local providers are not
                bounded: they are infallible and always run to completion.

        Returns:
            The first successful NarrationResult

        Raises:
            NarrationUnavailableError: no provider could handle the request
        """
        timeout = self.timeout_seconds if timeout_seconds is None else timeout_seconds
        if timeout <= 0:
            raise ValueError("timeout_seconds must be positive")

        for provider in self.providers:
            if not provider.supports(request.kind):
                continue
            if not provider.is_available():
                logger.debug(f"Narration provider {provider.name} unavailable; skipping")
                continue
            try:
                if provider.source is NarrationSource.CLOUD:
                    result = await asyncio.wait_for(
                        provider.try_generate(request, timeout_seconds=timeout),
                        timeout=timeout,
                    )
                else:
                    result = await provider.try_generate(request, timeout_seconds=timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    f"Narration provider {provider.name} timed out after {timeout}s "
                    f"({request.kind.value}); falling back"
                )
                continue
            except ProviderError as exc:
                logger.warning(
                    f"Narration provider {provider.name} failed ({request.kind.value}): {exc.message}; falling back"
                )
                continue
            except Exception as exc:
                logger.error(
                    f"Unexpected error from narration provider {provider.name}: {exc}",
                    exc_info=True,
                )
                continue

            logger.debug(
                f"Narration from {provider.name} ({result.source.value}) in {result.latency_millis}ms"
            )
            return result

        raise NarrationUnavailableError(f"No narration provider could handle a {request.kind.value} request")

    # -------------------------------------------------------------------------
    # Narration kinds
    # -------------------------------------------------------------------------

    async def describe_scene(
        self,
        summary: SceneSummary,
        detected_text: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> NarrationResult:
        request = NarrationRequest(kind=NarrationKind.SCENE, summary=summary, detected_text=detected_text)
        return await self.generate(request, timeout_seconds)

    async def guide_navigation(
        self,
        target: str,
        detections: Sequence[Detection],
        user_intent: str = "",
        timeout_seconds: Optional[float] = None,
    ) -> NarrationResult:
        request = NarrationRequest(
            kind=NarrationKind.NAVIGATION,
            target=target,
            detections=tuple(detections),
            user_intent=user_intent,
        )
        return await self.generate(request, timeout_seconds)

    async def answer_question(
        self,
        question: str,
        summary: SceneSummary,
        detected_text: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> NarrationResult:
        request = NarrationRequest(
            kind=NarrationKind.QUESTION,
            question=question,
            summary=summary,
            detected_text=detected_text,
        )
        return await self.generate(request, timeout_seconds)

    async def describe_image(
        self,
        frame: np.ndarray,
        timeout_seconds: Optional[float] = None,
    ) -> NarrationResult:
        """Cloud vision description. Raises NarrationUnavailableError without a cloud provider."""
        request = NarrationRequest(kind=NarrationKind.IMAGE, frame=frame)
        return await self.generate(request, timeout_seconds)
