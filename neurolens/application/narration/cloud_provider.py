"""Cloud narration provider backed by Mistral chat and vision completions."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping

from ...core.exceptions import CloudNarrationError
from ...domain.models.narration import NarrationKind, NarrationRequest, NarrationResult, NarrationSource
from ...infrastructure.external.mistral_client import MistralChatClient, frame_to_data_url
from . import prompts
from .base import NarrationProvider

logger = logging.getLogger(__name__)

# Designed trust levels per sub-operation, not measured accuracy.
CLOUD_CONFIDENCE: Mapping[NarrationKind, float] = {
    NarrationKind.SCENE: 0.95,
    NarrationKind.NAVIGATION: 0.96,
    NarrationKind.QUESTION: 0.97,
    NarrationKind.IMAGE: 0.98,
}


class CloudNarrationProvider(NarrationProvider):
    name = "mistral"
    source = NarrationSource.CLOUD

    def __init__(
        self,
        client: MistralChatClient,
        text_model: str = "mistral-small-latest",
        vision_model: str = "pixtral-12b-2409",
        enabled: bool = True,
    ) -> None:
        self._client = client
        self.text_model = text_model
        self.vision_model = vision_model
        self.enabled = enabled

    def is_available(self) -> bool:
        """Available only with credentials and the cloud toggle on."""
        return self.enabled and self._client.has_credentials()

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def _messages(self, request: NarrationRequest) -> List[Dict[str, Any]]:
        if request.kind == NarrationKind.SCENE:
            content: Any = prompts.scene_prompt(request.summary, request.detected_text)
        elif request.kind == NarrationKind.NAVIGATION:
            content = prompts.navigation_prompt(request.target, request.detections, request.user_intent)
        elif request.kind == NarrationKind.QUESTION:
            content = prompts.question_prompt(request.question, request.summary, request.detected_text)
        else:
            if request.frame is None:
                raise CloudNarrationError("Image narration requested without a frame")
            content = [
                {"type": "text", "text": prompts.IMAGE_PROMPT},
                {"type": "image_url", "image_url": {"url": frame_to_data_url(request.frame)}},
            ]
        return [{"role": "user", "content": content}]

    async def try_generate(
        self,
        request: NarrationRequest,
        *,
        timeout_seconds: float = 8.0,
    ) -> NarrationResult:
        if not self.is_available():
            raise CloudNarrationError("Cloud narration is not available")

        t0 = time.monotonic()
        model = self.vision_model if request.kind == NarrationKind.IMAGE else self.text_model
        text = await self._client.complete(model, self._messages(request), timeout_seconds=timeout_seconds)
        elapsed = (time.monotonic() - t0) * 1000

        return NarrationResult(
            text=text,
            confidence=CLOUD_CONFIDENCE[request.kind],
            source=self.source,
            latency_millis=int(round(elapsed)),
        )
