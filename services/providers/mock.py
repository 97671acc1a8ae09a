from __future__ import annotations

from services.providers.base import MOCK_PROVIDER
from services.response_parser import fallback_talking_points
from services.script_models import GenerationRequest, GenerationResult

SCRIPT_TEMPLATE = """
# {product_name} Demo Script

## Introduction
Hello and welcome! Today I'm excited to show you {product_name}, which helps {audience} to solve {pain_points}.

## Problem Statement
{pain_points}

## Solution Overview
{description}

## Key Features
{feature_lines}

## Benefits
By using {product_name}, you'll be able to:
- Save time and resources
- Improve efficiency
- Enhance your overall experience

## Demonstration
Let me show you how it works...

## Closing
Thank you for your time today. Any questions?
""".strip()


class MockScriptProvider:
    """Offline generator used when no provider is selected."""

    name = MOCK_PROVIDER

    def generate_result(self, request: GenerationRequest) -> GenerationResult:
        feature_lines = "\n".join(f"- {feature}" for feature in request.key_feature_list())
        script = SCRIPT_TEMPLATE.format(
            product_name=request.product_name,
            audience=request.audience,
            pain_points=request.pain_points,
            description=request.description,
            feature_lines=feature_lines,
        )
        return GenerationResult(
            script=script,
            talking_points=fallback_talking_points(request),
        )
