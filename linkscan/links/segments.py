"""Rebuild a text as plain and link segments."""

from typing import Optional, Sequence

from ..models.types import MatchSpan, Segment
from .detector import linkify_text


def split_segments(text: str, spans: Optional[Sequence[MatchSpan]] = None) -> list[Segment]:
    """Split text into alternating plain-text and link segments.

    Args:
        text: Original text.
        spans: Matches for this text. Scanned with linkify_text if omitted.

    Returns:
        Segments whose ``source`` slices concatenate back to ``text``.
    """
    if not text:
        return []
    if spans is None:
        spans = linkify_text(text)

    segments = []
    last_index = 0

    for span in spans:
        if last_index < span.start:
            segments.append(Segment(source=text[last_index:span.start]))
        segments.append(Segment(source=text[span.start:span.end], link=span))
        last_index = span.end

    if last_index < len(text):
        segments.append(Segment(source=text[last_index:]))

    return segments
