from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScriptGenerationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_name: str = Field(max_length=200)
    audience: str = Field(max_length=500)
    description: str = Field(max_length=4000)
    key_features: str = Field(max_length=2000)
    pain_points: str = Field(max_length=2000)
    tone: str | None = Field(default=None, max_length=64)
    format: str | None = Field(default=None, max_length=64)
    template: str | None = Field(default=None, max_length=64)
    audience_type: str | None = Field(default=None, max_length=64)


class ScriptGenerationResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    script: str
    talking_points: str


class ProviderStatusResponse(BaseModel):
    provider: str
    configured: bool
