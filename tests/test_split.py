"""Tests for response splitting and point formatting."""

from critiqueboard.text.split import format_synthesized_point, parse_point_list, split_response


def test_split_legacy_format():
    assert split_response("1. First point ** ** 2. Second point") == ["First point", "Second point"]


def test_split_heading_format():
    response = "## Title A\nBody A\n---\n## Title B\nBody B"
    assert split_response(response) == ["## Title A", "Body A", "## Title B", "Body B"]


def test_split_heading_without_body():
    assert split_response("## Only a title") == ["## Only a title"]


def test_split_empty():
    assert split_response("") == []


def test_parse_point_list_pads():
    assert parse_point_list("1. A ** ** 2. B", 3, "fallback") == ["A", "B", "B"]


def test_parse_point_list_truncates():
    assert parse_point_list("A ** B ** C", 2, "fallback") == ["A", "B"]


def test_parse_point_list_fallback():
    assert parse_point_list("", 2, "fallback") == ["fallback", "fallback"]


def test_format_synthesized_point():
    assert format_synthesized_point("2. - lower case point") == "Lower case point"
    assert format_synthesized_point("• bullet") == "Bullet"
    assert format_synthesized_point("") == ""
