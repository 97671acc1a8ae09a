from __future__ import annotations

import logging

from anthropic import AnthropicError, AsyncAnthropic, AuthenticationError, PermissionDeniedError

from services.errors import ProviderUnavailableError, UpstreamError
from services.providers.base import ProviderName

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_TOKENS = 4000


class AnthropicScriptProvider:
    """Generate demo scripts with the Anthropic messages API."""

    name = ProviderName.anthropic

    def __init__(self, api_key: str | None, model: str = "claude-3-5-sonnet-latest") -> None:
        self._api_key = api_key
        self._model = model

    async def generate(self, prompt: str, system_instruction: str) -> str:
        if not self._api_key:
            raise ProviderUnavailableError(self.name.value)

        try:
            async with AsyncAnthropic(api_key=self._api_key) as client:
                message = await client.messages.create(
                    model=self._model,
                    max_tokens=MAX_TOKENS,
                    temperature=TEMPERATURE,
                    system=system_instruction,
                    messages=[{"role": "user", "content": prompt}],
                )
        except (AuthenticationError, PermissionDeniedError) as exc:
            raise UpstreamError(self.name.value, str(exc), authentication=True) from exc
        except AnthropicError as exc:
            raise UpstreamError(self.name.value, str(exc)) from exc

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        if not text:
            logger.warning("Anthropic returned no text blocks for model %s", self._model)
        return text
