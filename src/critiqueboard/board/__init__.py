"""Board structures: decision trees built from notes and connectors."""

from .tree import ContentMatcher, IdMatcher, build_decision_tree, clean_content

__all__ = ["ContentMatcher", "IdMatcher", "build_decision_tree", "clean_content"]
