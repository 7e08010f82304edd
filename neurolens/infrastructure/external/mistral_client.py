"""Mistral chat-completions client used by the cloud narration provider."""
import base64
import logging
from io import BytesIO
from typing import Any, Dict, List, Optional

import httpx
import numpy as np
from PIL import Image

from ...core.exceptions import CloudNarrationError

logger = logging.getLogger(__name__)

Message = Dict[str, Any]


def frame_to_data_url(frame: np.ndarray, quality: int = 50) -> str:
    """
    Convert numpy array (BGR image) to a base64 JPEG data URL.

    Args:
        frame: numpy array of shape (H, W, 3) in BGR format
        quality: JPEG quality (the camera path captures at 0.5)

    Returns:
        "data:image/jpeg;base64,..." string
    """
    rgb_image = frame[:, :, ::-1]
    pil_image = Image.fromarray(rgb_image.astype(np.uint8))

    buffer = BytesIO()
    pil_image.save(buffer, format="JPEG", quality=quality)
    encoded = base64.b64encode(buffer.getvalue()).decode("utf-8")

    return f"data:image/jpeg;base64,{encoded}"


class MistralChatClient:
    """
    Thin async client for Mistral's chat completions endpoint.

    Every failure (transport, timeout, non-2xx, malformed or empty body) is
    raised as CloudNarrationError so callers handle one type.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.mistral.ai/v1",
        temperature: float = 0.7,
        max_tokens: int = 500,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Bearer token
            base_url: API root; "/chat/completions" is appended
            temperature: Sampling temperature sent with every request
            max_tokens: Max output tokens sent with every request
            http_client: Optional shared async HTTP client for connection pooling.
                        If None, a client is created per request.
        """
        self.api_key = api_key or ""
        self.chat_url = base_url.rstrip("/") + "/chat/completions"
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._http_client = http_client

        if self.api_key:
            logger.info(f"Mistral client configured with key {self.api_key[:4]}...")
        else:
            logger.warning("Mistral client created without an API key")

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def _build_payload(self, model: str, messages: List[Message]) -> Dict[str, Any]:
        return {
            "model": model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def _post(self, payload: Dict[str, Any], timeout_seconds: float) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self._http_client is not None:
            return await self._http_client.post(
                self.chat_url, headers=headers, json=payload, timeout=timeout_seconds
            )
        async with httpx.AsyncClient(timeout=timeout_seconds) as client:
            return await client.post(self.chat_url, headers=headers, json=payload)

    async def complete(
        self,
        model: str,
        messages: List[Message],
        timeout_seconds: float = 8.0,
    ) -> str:
        """
        Send a chat completion request and return the first choice's text.

        Args:
            model: Model name, e.g. "mistral-small-latest"
            messages: Ordered message list
            timeout_seconds: Request timeout

        Returns:
            Stripped, non-empty completion text
        """
        if not self.api_key:
            raise CloudNarrationError("Mistral API key not configured")

        payload = self._build_payload(model, messages)
        logger.debug(f"Calling Mistral chat completions with model: {model}")

        try:
            response = await self._post(payload, timeout_seconds)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise CloudNarrationError(
                f"Mistral API error: {e.response.status_code} - {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise CloudNarrationError("Mistral API timeout") from e
        except httpx.HTTPError as e:
            raise CloudNarrationError(f"Mistral transport error: {e}") from e
        except ValueError as e:
            raise CloudNarrationError(f"Mistral returned a non-JSON body: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CloudNarrationError(f"Malformed Mistral response: {e!r}") from e

        if not isinstance(content, str) or not content.strip():
            raise CloudNarrationError("Empty completion from Mistral")

        return content.strip()
