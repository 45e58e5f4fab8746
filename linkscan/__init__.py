"""linkscan - find URLs and email addresses in free text.

This package provides tools to:
1. Scan Unicode text for URLs, bare domains and email addresses
2. Decide where each link ends around punctuation, brackets and bidi marks
3. Split a text into plain and link segments for rendering by the caller

Example:
    from linkscan import linkify_text

    for span in linkify_text("Mail user@example.com or visit example.com."):
        print(span.kind.value, span.start, span.end, span.text)
"""

from .links import CharClass, Linkifier, classify, linkify_text, split_segments
from .models import MatchKind, MatchSpan, Segment

__version__ = "0.1.0"

__all__ = [
    # Main entry points
    "Linkifier",
    "linkify_text",
    "split_segments",
    # Models
    "MatchKind",
    "MatchSpan",
    "Segment",
    # Character classes
    "CharClass",
    "classify",
]
