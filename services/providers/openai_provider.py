from __future__ import annotations

import logging

from openai import AsyncOpenAI, AuthenticationError, OpenAIError, PermissionDeniedError

from services.errors import ProviderUnavailableError, UpstreamError
from services.providers.base import ProviderName

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 4000


class OpenAIScriptProvider:
    """Generate demo scripts with the OpenAI responses API."""

    name = ProviderName.openai

    def __init__(self, api_key: str | None, model: str = "gpt-4o") -> None:
        self._api_key = api_key
        self._model = model

    async def generate(self, prompt: str, system_instruction: str) -> str:
        if not self._api_key:
            raise ProviderUnavailableError(self.name.value)

        try:
            async with AsyncOpenAI(api_key=self._api_key) as client:
                response = await client.responses.create(
                    model=self._model,
                    input=[
                        {"role": "system", "content": system_instruction},
                        {"role": "user", "content": prompt},
                    ],
                    temperature=TEMPERATURE,
                    max_output_tokens=MAX_OUTPUT_TOKENS,
                )
        except (AuthenticationError, PermissionDeniedError) as exc:
            raise UpstreamError(self.name.value, str(exc), authentication=True) from exc
        except OpenAIError as exc:
            raise UpstreamError(self.name.value, str(exc)) from exc

        content = getattr(response, "output_text", None)
        if not content:
            logger.warning("OpenAI returned empty response for model %s", self._model)
            return ""
        return content
