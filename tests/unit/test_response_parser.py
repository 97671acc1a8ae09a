from __future__ import annotations

from services.prompt_builder import SCRIPT_MARKER, TALKING_POINTS_MARKER
from services.response_parser import fallback_talking_points, parse_script_response
from services.script_models import GenerationRequest


def _request() -> GenerationRequest:
    return GenerationRequest(
        product_name="Acme CRM",
        audience="sales managers",
        description="pipeline tool",
        key_features="analytics, mobile",
        pain_points="slow reporting",
    )


def test_parse_both_sections() -> None:
    raw = f"{SCRIPT_MARKER}\nFoo\n{TALKING_POINTS_MARKER}\nBar"

    result = parse_script_response(raw, _request())

    assert result.script == "Foo"
    assert result.talking_points == "Bar"


def test_parse_markers_case_insensitive_with_preamble() -> None:
    raw = (
        "Sure! Here is your script.\n\n"
        "## detailed_script\n  Welcome to the demo.\n\n"
        "## Talking_Points\n- point one\n- point two\n"
    )

    result = parse_script_response(raw, _request())

    assert result.script == "Welcome to the demo."
    assert result.talking_points == "- point one\n- point two"


def test_parse_sections_in_reverse_order() -> None:
    raw = f"{TALKING_POINTS_MARKER}\n- first\n{SCRIPT_MARKER}\nFull script"

    result = parse_script_response(raw, _request())

    assert result.script == "Full script"
    assert result.talking_points == "- first"


def test_parse_without_markers_uses_whole_text() -> None:
    result = parse_script_response("just plain text", _request())

    assert result.script == "just plain text"
    assert result.talking_points
    assert "Acme CRM" in result.talking_points
    assert result.talking_points == fallback_talking_points(_request())


def test_parse_script_only_synthesizes_talking_points() -> None:
    raw = f"{SCRIPT_MARKER}\nOnly a script here"

    result = parse_script_response(raw, _request())

    assert result.script == "Only a script here"
    assert result.talking_points == fallback_talking_points(_request())


def test_parse_talking_points_only_leaves_script_empty() -> None:
    raw = f"Intro text\n{TALKING_POINTS_MARKER}\n- a\n- b"

    result = parse_script_response(raw, _request())

    assert result.script == ""
    assert result.talking_points == "- a\n- b"


def test_parse_empty_talking_points_section_is_replaced() -> None:
    raw = f"{SCRIPT_MARKER}\nScript body\n{TALKING_POINTS_MARKER}\n   \n"

    result = parse_script_response(raw, _request())

    assert result.script == "Script body"
    assert result.talking_points == fallback_talking_points(_request())


def test_parse_empty_text_never_returns_both_empty() -> None:
    result = parse_script_response("", _request())

    assert result.script == ""
    assert result.talking_points


def test_fallback_talking_points_lists_each_feature() -> None:
    request = GenerationRequest(
        product_name="Acme CRM",
        audience="sales managers",
        description="pipeline tool",
        key_features=" analytics ,mobile,, ",
        pain_points="slow reporting",
    )

    points = fallback_talking_points(request)

    lines = points.splitlines()
    assert lines[0] == "• Introduce Acme CRM"
    assert "• Mention target audience: sales managers" in lines
    assert "• Highlight pain points: slow reporting" in lines
    assert "• Explain solution: pipeline tool" in lines
    assert [line for line in lines if line.startswith("  - ")] == ["  - analytics", "  - mobile"]
    assert lines[-1] == "• Close and ask for questions"


def test_marker_must_not_be_prefix_of_longer_word() -> None:
    raw = f"{SCRIPT_MARKER}S are below\nbody\n{TALKING_POINTS_MARKER}\n- a"

    result = parse_script_response(raw, _request())

    assert result.script == ""
    assert result.talking_points == "- a"


def test_marker_at_end_of_text_is_recognized() -> None:
    raw = f"Script body\n{TALKING_POINTS_MARKER}"

    result = parse_script_response(raw, _request())

    assert result.script == ""
    assert result.talking_points == fallback_talking_points(_request())
