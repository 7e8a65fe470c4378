"""Claude-backed critique of design decisions."""

from .critic import Critic, ProcessingGuard, extract_json

__all__ = ["Critic", "ProcessingGuard", "extract_json"]
