"""Data models for link scanning."""

from .types import MatchKind, MatchSpan, Segment

__all__ = [
    "MatchKind",
    "MatchSpan",
    "Segment",
]
