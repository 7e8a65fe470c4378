"""Exceptions raised by critiqueboard."""


class InvalidInput(ValueError):
    """Raised when a merge strategy receives something other than strings."""


class ThemeGenerationInProgress(RuntimeError):
    """Raised when theme generation is requested while one is already running."""
