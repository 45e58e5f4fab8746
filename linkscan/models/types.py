"""Data types for link matches."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MatchKind(str, Enum):
    """Kinds of matches the scanner can produce."""

    URL = "url"
    EMAIL = "email"


@dataclass(frozen=True)
class MatchSpan:
    """A single match found in a text.

    ``start`` and ``end`` are code-point offsets into the scanned text. For
    URLs written without a scheme, ``text`` carries an ``http://`` prefix that
    is not part of ``input[start:end]``.
    """

    start: int
    end: int
    kind: MatchKind
    text: str

    @property
    def href(self) -> str:
        """Link target for this match."""
        if self.kind == MatchKind.EMAIL:
            return f"mailto:{self.text}"
        return self.text

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "start": self.start,
            "end": self.end,
            "kind": self.kind.value,
            "text": self.text,
        }


@dataclass(frozen=True)
class Segment:
    """A slice of the input that is either plain text or one link."""

    source: str
    link: Optional[MatchSpan] = None

    @property
    def is_link(self) -> bool:
        return self.link is not None

    @property
    def text(self) -> str:
        """Display text: the resolved link text, or the plain slice."""
        if self.link is not None:
            return self.link.text
        return self.source

    @property
    def href(self) -> Optional[str]:
        if self.link is None:
            return None
        return self.link.href
