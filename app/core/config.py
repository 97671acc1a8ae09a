from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "staging", "test"]


def _resolve_env_files() -> tuple[str, ...]:
    env = os.getenv("DEMOSCRIPT_ENVIRONMENT", "development").lower()
    if env in {"prod", "production"}:
        return (".env", ".env.prod")
    if env in {"dev", "development"}:
        return (".env", ".env.dev")
    if env in {"test", "testing"}:
        return (".env", ".env.test")
    return (".env",)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DEMOSCRIPT_",
        env_file=_resolve_env_files(),
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Environment = "development"
    project_name: str = "Demo Script Generator"
    api_v1_prefix: str = "/api"
    log_level: str = "INFO"
    log_json: bool = False
    rate_limit: str = "30/minute"
    allowed_hosts: list[str] = ["*"]
    cors_origins: list[str] = []
    enable_docs: bool = True

    # None or an unknown name selects the offline mock generator.
    llm_provider: str | None = None
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    google_api_key: str | None = None
    openai_model: str = "gpt-4o"
    anthropic_model: str = "claude-3-5-sonnet-latest"
    google_model: str = "gemini-2.5-flash"


@lru_cache
def get_settings() -> Settings:
    return Settings()
