from __future__ import annotations


class ScriptGenerationError(RuntimeError):
    """Base class for failures surfaced by the script generation pipeline."""


class ValidationError(ScriptGenerationError):
    """Raised when a required request field is missing or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class ProviderUnavailableError(ScriptGenerationError):
    """Raised when the selected provider has no credential configured."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"{provider} API key is not configured.")
        self.provider = provider


class UpstreamError(ScriptGenerationError):
    """Raised when the upstream provider rejects or fails the call."""

    def __init__(self, provider: str, message: str, *, authentication: bool = False) -> None:
        super().__init__(f"{provider} API error: {message}")
        self.provider = provider
        self.authentication = authentication
