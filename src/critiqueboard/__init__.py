"""critiqueboard - critique, deduplicate and organise design decisions from a shared board."""

__version__ = "0.1.0"
