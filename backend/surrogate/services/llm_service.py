"""
Language model transport.

Sends the system instruction and the user's turn to Claude and returns
the raw assistant text. Interpreting that text is the orchestrator's job.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from anthropic import APIConnectionError, APIStatusError, AsyncAnthropic

from surrogate.config import settings

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MEDIA_TYPE = "image/jpeg"

_DATA_URL_PATTERN = re.compile(r"^data:(?P<media_type>image/[\w.+-]+);base64,(?P<data>.+)$", re.DOTALL)


class TransportError(Exception):
    """Raised when the model call fails or returns nothing usable."""


def image_block(image: str) -> Dict[str, Any]:
    """
    Build an image content block from a data URL or bare base64 string.

    Bare base64 is assumed to be JPEG.
    """
    match = _DATA_URL_PATTERN.match(image.strip())
    if match:
        media_type, data = match.group("media_type"), match.group("data")
    else:
        media_type, data = DEFAULT_IMAGE_MEDIA_TYPE, image.strip()

    return {
        "type": "image",
        "source": {"type": "base64", "media_type": media_type, "data": data},
    }


def build_messages(
    message: str,
    history: Optional[List[str]] = None,
    image: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Build the role-tagged message list for one turn.

    Prior turns are condensed into a single "Previous Context" text part
    ahead of the current message; the image, if any, rides along as a
    separate content part of the same user message.

    Args:
        message: Current user message
        history: Prior turns as "<sender>: <text>" lines
        image: Optional base64 image (data URL or bare)

    Returns:
        Messages for the Messages API
    """
    content: List[Dict[str, Any]] = []

    if history:
        content.append({"type": "text", "text": "Previous Context:\n" + "\n".join(history)})

    content.append({"type": "text", "text": message or "(no text)"})

    if image:
        content.append(image_block(image))

    content.append({"type": "text", "text": "Respond in valid JSON."})

    return [{"role": "user", "content": content}]


class AnthropicTransport:
    """Transport backed by the Anthropic Messages API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[AsyncAnthropic] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        """
        Initialize the transport.

        Args:
            api_key: Anthropic API key (default: settings.anthropic_api_key)
            client: Optional preconfigured AsyncAnthropic client
            model: Model name (default: settings.llm_model)
            max_tokens: Response token limit (default: settings.llm_max_tokens)
            temperature: Sampling temperature (default: settings.llm_temperature)
        """
        self.client = client or AsyncAnthropic(api_key=api_key or settings.anthropic_api_key)
        self.model = model or settings.llm_model
        self.max_tokens = max_tokens or settings.llm_max_tokens
        self.temperature = settings.llm_temperature if temperature is None else temperature

    async def complete(self, system: str, messages: List[Dict[str, Any]]) -> str:
        """
        Send one request and return the assistant text.

        Raises:
            TransportError: On non-success status, network failure, or empty content
        """
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=system,
                messages=messages,
            )
        except APIStatusError as e:
            logger.warning(f"Anthropic API error: {e.status_code} {e.message}")
            raise TransportError(f"Model API error: {e.status_code}") from e
        except APIConnectionError as e:
            logger.warning(f"Anthropic API connection failed: {e}")
            raise TransportError("Model API unreachable") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        if not text.strip():
            raise TransportError("Empty response from model")

        return text
