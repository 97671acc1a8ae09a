from __future__ import annotations

import logging
import re

from services.prompt_builder import SCRIPT_MARKER, TALKING_POINTS_MARKER
from services.script_models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

_MARKER_PATTERNS = {
    "script": re.compile(re.escape(SCRIPT_MARKER) + r"(?=\s|$)", re.IGNORECASE),
    "talking_points": re.compile(re.escape(TALKING_POINTS_MARKER) + r"(?=\s|$)", re.IGNORECASE),
}


def fallback_talking_points(request: GenerationRequest) -> str:
    feature_lines = "\n".join(f"  - {feature}" for feature in request.key_feature_list())
    return "\n".join(
        [
            f"• Introduce {request.product_name}",
            f"• Mention target audience: {request.audience}",
            f"• Highlight pain points: {request.pain_points}",
            f"• Explain solution: {request.description}",
            "• Demo key features:",
            feature_lines,
            "• Emphasize benefits",
            "• Provide demonstration",
            "• Close and ask for questions",
        ]
    )


def _extract_sections(raw_text: str) -> dict[str, str]:
    """Return the text following each marker found, up to the next marker or the end."""
    found: list[tuple[int, int, str]] = []
    for key, pattern in _MARKER_PATTERNS.items():
        match = pattern.search(raw_text)
        if match:
            found.append((match.start(), match.end(), key))
    found.sort()

    sections: dict[str, str] = {}
    for index, (_, content_start, key) in enumerate(found):
        content_end = found[index + 1][0] if index + 1 < len(found) else len(raw_text)
        sections[key] = raw_text[content_start:content_end].strip()
    return sections


def parse_script_response(raw_text: str, request: GenerationRequest) -> GenerationResult:
    """Split provider output into script and talking points.

    Output without any marker becomes the script as a whole. Missing or empty
    talking points are synthesized from the request, so the result is never
    empty on both fields.
    """
    sections = _extract_sections(raw_text)

    if not sections:
        logger.warning("No section markers in provider output; using full text as script")
        return GenerationResult(
            script=raw_text.strip(),
            talking_points=fallback_talking_points(request),
        )

    script = sections.get("script", "")
    talking_points = sections.get("talking_points", "")
    if not talking_points:
        logger.warning("Talking points missing from provider output; synthesizing from request")
        talking_points = fallback_talking_points(request)

    return GenerationResult(script=script, talking_points=talking_points)
