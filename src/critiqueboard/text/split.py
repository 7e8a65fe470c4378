"""Split raw model responses into individual points."""

import re

_RULE_RE = re.compile(r"-{3,}")
_HEADING_SPLIT_RE = re.compile(r"(?=##)")
_NUMBER_PREFIX_RE = re.compile(r"^\d+\.\s*")
_BULLET_PREFIX_RE = re.compile(r"^[-•]\s*")


def split_response(response: str) -> list[str]:
    """Split a response into points.

    Responses containing ``##`` headings are split on ``---`` rules and then
    per heading, with each heading and its body returned as separate points.
    Anything else is treated as the legacy ``**``-delimited format.
    """
    if not response:
        return []

    points: list[str] = []
    if "##" in response:
        sections = [s.strip() for s in _RULE_RE.split(response) if s.strip()]
        for section in sections:
            for subsection in _HEADING_SPLIT_RE.split(section):
                subsection = subsection.strip()
                if not subsection.startswith("##"):
                    continue
                title, _, body = subsection.partition("\n")
                if title.strip():
                    points.append(title.strip())
                if body.strip():
                    points.append(body.strip())
    else:
        points = [p.strip() for p in response.split("**") if p.strip()]

    cleaned = (_NUMBER_PREFIX_RE.sub("", p).strip() for p in points)
    return [p for p in cleaned if p]


def parse_point_list(response: str, point_count: int, fallback: str) -> list[str]:
    """Parse a ``**``-separated response into exactly ``point_count`` points.

    Short responses are padded by repeating the last point (or ``fallback``
    when nothing was returned).
    """
    text = response.replace("•", "")
    text = re.sub(r"\d+\.", "", text)
    text = re.sub(r"\s+", " ", text)
    text = re.sub(r"\*\*\s+\*\*", "**", text).strip()
    points = [p.strip() for p in text.split("**") if p.strip()]

    while len(points) < point_count:
        points.append(points[-1] if points else fallback)
    return points[:point_count]


def format_synthesized_point(point: str) -> str:
    """Strip numbering and bullets, and capitalise the first letter."""
    point = _NUMBER_PREFIX_RE.sub("", point)
    point = _BULLET_PREFIX_RE.sub("", point).strip()
    return point[:1].upper() + point[1:]
