from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from services.errors import ScriptGenerationError, UpstreamError
from services.prompt_builder import SYSTEM_INSTRUCTION, build_prompt
from services.providers.base import MOCK_PROVIDER, ProviderConfig, ProviderName
from services.providers.mock import MockScriptProvider
from services.providers.registry import PROVIDER_FACTORIES, ProviderFactory
from services.response_parser import parse_script_response
from services.script_models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderStatus:
    provider: str
    configured: bool


class ScriptGeneratorService:
    """Generate a demo script and talking points with the configured provider.

    An unset or unrecognized provider selects the offline mock. A recognized
    provider that fails, including one without a credential, is reported to
    the caller and never downgraded to the mock.
    """

    def __init__(
        self,
        config: ProviderConfig,
        factories: Mapping[ProviderName, ProviderFactory] = PROVIDER_FACTORIES,
    ) -> None:
        self._config = config
        self._factories = factories
        self._mock = MockScriptProvider()

    def status(self) -> ProviderStatus:
        selected = self._config.selected_provider()
        if selected is None or selected not in self._factories:
            return ProviderStatus(provider=MOCK_PROVIDER, configured=True)
        return ProviderStatus(
            provider=selected.value,
            configured=self._config.credential_for(selected) is not None,
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        request.validate()

        selected = self._config.selected_provider()
        factory = self._factories.get(selected) if selected is not None else None
        if factory is None:
            if self._config.provider:
                logger.info(
                    "Unknown provider %r configured; using mock generator", self._config.provider
                )
            else:
                logger.info("No provider configured; using mock generator")
            return self._mock.generate_result(request)

        provider = factory(self._config)
        prompt = build_prompt(request)
        logger.info("Generating demo script with %s", provider.name.value)

        try:
            raw_text = await provider.generate(prompt, SYSTEM_INSTRUCTION)
        except ScriptGenerationError as exc:
            logger.warning("Script generation with %s failed: %s", provider.name.value, exc)
            raise
        except Exception as exc:  # noqa: BLE001 - surface unexpected provider errors as upstream failures
            logger.exception("Unexpected error from %s", provider.name.value)
            raise UpstreamError(provider.name.value, str(exc) or type(exc).__name__) from exc

        return parse_script_response(raw_text, request)
