"""
Client for the hosted chat completion provider.

Sends an OpenAI-style chat completion request and returns the text of the
first choice. Any provider failure is reported as a single generic error;
the provider's own error text only reaches the server log.
"""

from typing import List, Optional

import httpx

from components.core.config import Settings
from components.core.errors import ConfigurationError, UpstreamError
from components.core.logging_config import get_logger

logger = get_logger("chat")

EMPTY_REPLY = "No response from AI."


class ChatCompletionClient:
    """REST client for the chat completion endpoint."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = settings.HUGGINGFACE_ENDPOINT
        self.api_key = settings.HUGGINGFACE_API_KEY
        self.model = settings.CHAT_MODEL
        self.max_tokens = settings.CHAT_MAX_TOKENS
        self.timeout = settings.CHAT_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def is_available(self) -> bool:
        """Check if the provider is configured."""
        return bool(self.api_key)

    async def complete(self, messages: List[dict]) -> str:
        """
        Forward a conversation to the provider.

        Args:
            messages: Ordered ``{"role", "content"}`` turns, sent as given

        Returns:
            Text of the first reply
        """
        if not self.is_available:
            raise ConfigurationError("Hugging Face API key not configured on server.")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    json={
                        "model": self.model,
                        "messages": messages,
                        "max_tokens": self.max_tokens,
                    },
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                )
                response.raise_for_status()
                data = response.json()
            reply = data["choices"][0]["message"]["content"]
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Chat provider returned %s: %s",
                exc.response.status_code,
                exc.response.text,
            )
            raise UpstreamError() from exc
        except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as exc:
            logger.error("Chat provider call failed: %r", exc)
            raise UpstreamError() from exc

        if reply is not None and not isinstance(reply, str):
            logger.error("Chat provider returned non-text content: %r", reply)
            raise UpstreamError()
        return reply or EMPTY_REPLY
