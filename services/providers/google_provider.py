from __future__ import annotations

import logging

from google import genai
from google.genai import errors, types

from services.errors import ProviderUnavailableError, UpstreamError
from services.providers.base import ProviderName

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 4096

_AUTH_STATUS_CODES = {401, 403}


def _is_auth_failure(exc: errors.APIError) -> bool:
    # Invalid Gemini keys come back as 400 INVALID_ARGUMENT, so the message is checked too.
    if exc.code in _AUTH_STATUS_CODES:
        return True
    return "api key" in str(exc).lower()


class GoogleScriptProvider:
    """Generate demo scripts with the Gemini API through google-genai."""

    name = ProviderName.google

    def __init__(self, api_key: str | None, model: str = "gemini-2.5-flash") -> None:
        self._api_key = api_key
        self._model = model

    async def generate(self, prompt: str, system_instruction: str) -> str:
        if not self._api_key:
            raise ProviderUnavailableError(self.name.value)

        client = genai.Client(api_key=self._api_key)
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_instruction,
                    temperature=TEMPERATURE,
                    max_output_tokens=MAX_OUTPUT_TOKENS,
                ),
            )
        except errors.APIError as exc:
            raise UpstreamError(
                self.name.value, str(exc), authentication=_is_auth_failure(exc)
            ) from exc

        text = response.text
        if not text:
            logger.warning("Gemini returned empty response for model %s", self._model)
            return ""
        return text
