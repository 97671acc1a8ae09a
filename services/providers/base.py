"""Provider contract and the read-only configuration used to pick one.

A provider turns the rendered prompt into raw model text. Parsing that text
into script and talking points is the response parser's job, not the
provider's.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.core.config import Settings


class ProviderName(str, Enum):
    openai = "openai"
    anthropic = "anthropic"
    google = "google"


MOCK_PROVIDER = "mock"


class ScriptProvider(Protocol):
    name: ProviderName

    async def generate(self, prompt: str, system_instruction: str) -> str:
        """Return the raw text produced by the upstream model."""
        ...


@dataclass(frozen=True)
class ProviderConfig:
    provider: str | None = None
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    google_api_key: str | None = None
    openai_model: str = "gpt-4o"
    anthropic_model: str = "claude-3-5-sonnet-latest"
    google_model: str = "gemini-2.5-flash"

    @classmethod
    def from_settings(cls, settings: Settings) -> ProviderConfig:
        return cls(
            provider=settings.llm_provider,
            openai_api_key=settings.openai_api_key,
            anthropic_api_key=settings.anthropic_api_key,
            google_api_key=settings.google_api_key,
            openai_model=settings.openai_model,
            anthropic_model=settings.anthropic_model,
            google_model=settings.google_model,
        )

    def selected_provider(self) -> ProviderName | None:
        """Resolve the selector; unset or unknown names mean no provider."""
        if not self.provider:
            return None
        try:
            return ProviderName(self.provider.strip().lower())
        except ValueError:
            return None

    def credential_for(self, name: ProviderName) -> str | None:
        key = {
            ProviderName.openai: self.openai_api_key,
            ProviderName.anthropic: self.anthropic_api_key,
            ProviderName.google: self.google_api_key,
        }[name]
        if key and key.strip():
            return key.strip()
        return None
