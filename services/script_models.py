from __future__ import annotations

from dataclasses import dataclass

from services.errors import ValidationError

DEFAULT_TONE = "professional"
DEFAULT_FORMAT = "problem-solution"
DEFAULT_TEMPLATE = "universal"
DEFAULT_AUDIENCE_TYPE = "mixed"

# (attribute, wire name) in the order they are validated.
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("product_name", "productName"),
    ("audience", "audience"),
    ("description", "description"),
    ("key_features", "keyFeatures"),
    ("pain_points", "painPoints"),
)


@dataclass(frozen=True)
class GenerationRequest:
    product_name: str
    audience: str
    description: str
    key_features: str
    pain_points: str
    tone: str | None = None
    format: str | None = None
    template: str | None = None
    audience_type: str | None = None

    def validate(self) -> None:
        for attribute, wire_name in REQUIRED_FIELDS:
            value = getattr(self, attribute)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(wire_name)
        # "," alone has no feature to list.
        if not self.key_feature_list():
            raise ValidationError("keyFeatures")

    def key_feature_list(self) -> list[str]:
        return [item.strip() for item in self.key_features.split(",") if item.strip()]

    @property
    def resolved_tone(self) -> str:
        return self.tone or DEFAULT_TONE

    @property
    def resolved_format(self) -> str:
        return self.format or DEFAULT_FORMAT

    @property
    def resolved_template(self) -> str:
        return self.template or DEFAULT_TEMPLATE

    @property
    def resolved_audience_type(self) -> str:
        return self.audience_type or DEFAULT_AUDIENCE_TYPE


@dataclass(frozen=True)
class GenerationResult:
    script: str
    talking_points: str
