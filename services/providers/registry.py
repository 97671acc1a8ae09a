from __future__ import annotations

from collections.abc import Callable, Mapping

from services.providers.anthropic_provider import AnthropicScriptProvider
from services.providers.base import ProviderConfig, ProviderName, ScriptProvider
from services.providers.google_provider import GoogleScriptProvider
from services.providers.openai_provider import OpenAIScriptProvider

ProviderFactory = Callable[[ProviderConfig], ScriptProvider]

PROVIDER_FACTORIES: Mapping[ProviderName, ProviderFactory] = {
    ProviderName.openai: lambda config: OpenAIScriptProvider(
        api_key=config.credential_for(ProviderName.openai),
        model=config.openai_model,
    ),
    ProviderName.anthropic: lambda config: AnthropicScriptProvider(
        api_key=config.credential_for(ProviderName.anthropic),
        model=config.anthropic_model,
    ),
    ProviderName.google: lambda config: GoogleScriptProvider(
        api_key=config.credential_for(ProviderName.google),
        model=config.google_model,
    ),
}
