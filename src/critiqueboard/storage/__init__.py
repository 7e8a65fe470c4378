"""Persistence for critique sessions."""

from .analyses import AnalysisStore

__all__ = ["AnalysisStore"]
