"""Build a forest of decisions from board notes and connectors."""

import logging
import re
from typing import Iterable

from ..models import Connection, DecisionTreeNode, StickyNote

logger = logging.getLogger(__name__)

_PARAGRAPH_TAG_RE = re.compile(r"</?p>", re.IGNORECASE)


def clean_content(content: str) -> str:
    """Strip paragraph markup from note content."""
    return _PARAGRAPH_TAG_RE.sub("", content or "").strip()


class ContentMatcher:
    """Match connector endpoints to notes by cleaned text content.

    Connectors exported from the board reference notes by their text, so two
    notes with the same text are the same graph node.
    """

    def note_key(self, note: StickyNote) -> str:
        return clean_content(note.content)

    def endpoint_key(self, endpoint: str) -> str:
        return clean_content(endpoint)


class IdMatcher:
    """Match connector endpoints to notes by note id."""

    def note_key(self, note: StickyNote) -> str:
        return note.id

    def endpoint_key(self, endpoint: str) -> str:
        return endpoint.strip()


MATCHERS = {"content": ContentMatcher, "id": IdMatcher}


def build_decision_tree(
    notes: Iterable[StickyNote],
    connections: Iterable[Connection],
    matcher: ContentMatcher | IdMatcher | None = None,
) -> list[DecisionTreeNode]:
    """Build a forest rooted at the notes with no incoming connector.

    Cycles are broken per path; a node reached along two different paths
    appears under both. When every note has a parent, each note is returned
    as its own single-node tree.
    """
    matcher = matcher or ContentMatcher()

    note_map: dict[str, StickyNote] = {}
    for note in notes:
        key = matcher.note_key(note)
        existing = note_map.get(key)
        # Shorter id wins on duplicate keys
        if existing is None or len(note.id) < len(existing.id):
            note_map[key] = note

    if not note_map:
        return []

    children: dict[str, list[str]] = {key: [] for key in note_map}
    parents: dict[str, set[str]] = {key: set() for key in note_map}
    for conn in connections:
        source = matcher.endpoint_key(conn.from_)
        target = matcher.endpoint_key(conn.to)
        if source not in note_map or target not in note_map:
            logger.warning(f"Dropping connection with unknown endpoint: {conn.from_!r} -> {conn.to!r}")
            continue
        if target not in children[source]:
            children[source].append(target)
        parents[target].add(source)

    def build(key: str, path: frozenset[str]) -> DecisionTreeNode | None:
        if key in path:
            return None
        path = path | {key}
        note = note_map[key]
        node = DecisionTreeNode(content=clean_content(note.content), id=note.id)
        for child_key in children[key]:
            child = build(child_key, path)
            if child is not None:
                node.children.append(child)
        return node

    roots = [key for key in note_map if not parents[key]]
    if not roots:
        logger.info(f"No root notes among {len(note_map)} notes, returning them as separate trees")
        return [DecisionTreeNode(content=clean_content(n.content), id=n.id) for n in note_map.values()]

    return [tree for key in roots if (tree := build(key, frozenset())) is not None]
