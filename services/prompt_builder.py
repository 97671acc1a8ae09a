from __future__ import annotations

from services.script_models import GenerationRequest

SCRIPT_MARKER = "## DETAILED_SCRIPT"
TALKING_POINTS_MARKER = "## TALKING_POINTS"

SYSTEM_INSTRUCTION = "You are an expert demo script writer for product marketers."

PROMPT_TEMPLATE = """
Create a demo script for a product with the following details:

Product Name: {product_name}
Target Audience: {audience}
Product Description: {description}
Key Features: {key_features}
Pain Points Addressed: {pain_points}
Tone: {tone}
Format: {format}
Template: {template}
Audience Type: {audience_type}

Please provide:
1. A detailed script with sections including introduction, problem statement, solution overview, key features, benefits, demonstration, and closing.
2. A condensed version with just the key talking points in bullet format.

Format your response as follows:

{script_marker}
[Full detailed script here]

{talking_points_marker}
[Bullet points here]
""".strip()


def build_prompt(request: GenerationRequest) -> str:
    """Render the request into the prompt shared by every provider."""
    return PROMPT_TEMPLATE.format(
        product_name=request.product_name,
        audience=request.audience,
        description=request.description,
        key_features=request.key_features,
        pain_points=request.pain_points,
        tone=request.resolved_tone,
        format=request.resolved_format,
        template=request.resolved_template,
        audience_type=request.resolved_audience_type,
        script_marker=SCRIPT_MARKER,
        talking_points_marker=TALKING_POINTS_MARKER,
    )
