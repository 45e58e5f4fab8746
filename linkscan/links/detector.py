"""URL and email detection in free text.

Domains and email addresses are recognized with a small hand-written
recognizer over Unicode categories, so a scan stays linear in the input
length even for long unbroken tokens.
"""

import logging
import unicodedata
from typing import Optional

from ..models.types import MatchKind, MatchSpan
from .charclass import BRACKET_PAIRS, URL_SCHEMES, CharClass, classify, is_hard_terminator, is_soft_terminator


logger = logging.getLogger(__name__)


class _LabelIndex:
    """Precomputed runs of the domain and email grammar over one text.

    Grammar:
        domain = (label ".")+ final
        label  = (letter | digit | "-")+
        final  = letter{2,}
        email  = (letter | digit | "." | "-" | "_")+ "@" domain

    Letters are Unicode category L*, digits are category N*.
    """

    def __init__(self, text: str):
        n = len(text)
        self.text = text
        self.n = n

        # Each *_end[p] is the end of the run of that class starting at p
        self.letter_end = [n] * (n + 1)
        self.label_end = [n] * (n + 1)
        self.local_end = [n] * (n + 1)
        # Where "(label ".")* final" starting at p ends, or None
        self.tail_end: list[Optional[int]] = [None] * (n + 1)

        for p in range(n - 1, -1, -1):
            ch = text[p]
            group = unicodedata.category(ch)[0]
            is_letter = group == "L"
            is_label = is_letter or group == "N" or ch == "-"
            is_local = is_label or ch == "." or ch == "_"

            self.letter_end[p] = self.letter_end[p + 1] if is_letter else p
            self.label_end[p] = self.label_end[p + 1] if is_label else p
            self.local_end[p] = self.local_end[p + 1] if is_local else p

            # Prefer one more "label." group, fall back to a final label here
            tail = self._after_label_dot(p)
            if tail is None and self.letter_end[p] - p >= 2:
                tail = self.letter_end[p]
            self.tail_end[p] = tail

    def _after_label_dot(self, p: int) -> Optional[int]:
        """Match "label." at p and return where the rest of the domain ends."""
        e = self.label_end[p]
        if e > p and e < self.n and self.text[e] == ".":
            return self.tail_end[e + 1]
        return None

    def domain_end(self, p: int) -> Optional[int]:
        """End of a domain starting exactly at p, or None."""
        if p >= self.n:
            return None
        return self._after_label_dot(p)

    def email_end(self, p: int) -> Optional[int]:
        """End of an email address starting exactly at p, or None."""
        e = self.local_end[p]
        if e > p and e < self.n and self.text[e] == "@":
            return self.domain_end(e + 1)
        return None


class Linkifier:
    """Finds URLs and email addresses in message text.

    The scan is a single left-to-right pass. At each position an email is
    tried first, then a URL (with or without a scheme). Once a domain is
    found, the match is stretched over the following path, query and
    fragment while leaving out sentence punctuation and unbalanced brackets.

    Example:
        linkifier = Linkifier()
        for span in linkifier.scan("Write to me@example.com or see example.com/docs."):
            print(f"{span.kind.value} {span.start}-{span.end}: {span.text}")
    """

    # Prepended to the stored text of URLs written without a scheme
    DEFAULT_SCHEME = "http://"

    def scan(self, text: str) -> list[MatchSpan]:
        """Find all URL and email matches in text.

        Args:
            text: Text to scan. May be empty or contain any Unicode.

        Returns:
            Non-overlapping MatchSpan objects in left-to-right order.
        """
        matches: list[MatchSpan] = []
        if not text:
            return matches

        index = _LabelIndex(text)
        n = len(text)
        i = 0

        while i < n:
            # Check for email
            email_end = index.email_end(i)
            if email_end is not None:
                matches.append(
                    MatchSpan(start=i, end=email_end, kind=MatchKind.EMAIL, text=text[i:email_end])
                )
                i = email_end
                continue

            # Check for domain/URL
            scheme = self._match_scheme(text, i)
            domain_end = index.domain_end(i + len(scheme))
            if domain_end is not None:
                end = self._scan_trailing(text, domain_end)
                link = text[i:end]
                if not scheme:
                    link = self.DEFAULT_SCHEME + link
                matches.append(MatchSpan(start=i, end=end, kind=MatchKind.URL, text=link))
                i = end
                continue

            # Otherwise move forward
            i += 1

        logger.debug(f"Scanned {n} chars, found {len(matches)} match(es)")
        return matches

    @staticmethod
    def _match_scheme(text: str, pos: int) -> str:
        """Return the scheme prefix starting at pos, or an empty string."""
        for scheme in URL_SCHEMES:
            if text.startswith(scheme, pos):
                return scheme
        return ""

    @staticmethod
    def _scan_trailing(text: str, start: int) -> int:
        """Extend a URL past its domain over path, query and fragment.

        Args:
            text: Full text being scanned.
            start: Offset right after the matched domain.

        Returns:
            Offset where the URL ends.
        """
        n = len(text)
        open_stack: list[str] = []
        last_safe = start

        for j in range(start, n):
            char_class = classify(text[j])

            if char_class == CharClass.HARD_TERMINATOR:
                break

            if char_class == CharClass.SOFT_TERMINATOR:
                # Trailing punctuation stays outside the link
                if j + 1 == n or is_hard_terminator(text[j + 1]) or is_soft_terminator(text[j + 1]):
                    break

            elif char_class == CharClass.CLOSING_BRACKET:
                # A closer only belongs to the URL if the URL opened it
                if not open_stack or open_stack[-1] != BRACKET_PAIRS[text[j]]:
                    break
                open_stack.pop()

            elif char_class == CharClass.OPENING_BRACKET:
                open_stack.append(text[j])

            last_safe = j + 1

        return last_safe

    def extract_urls(self, text: str) -> list[str]:
        """Extract all URLs from text.

        Args:
            text: Text to search for URLs.

        Returns:
            Stored URL texts, in order. Schemeless URLs carry ``http://``.
        """
        return [span.text for span in self.scan(text) if span.kind == MatchKind.URL]

    def extract_emails(self, text: str) -> list[str]:
        """Extract all email addresses from text."""
        return [span.text for span in self.scan(text) if span.kind == MatchKind.EMAIL]

    def find_links(
        self,
        text: str,
        unique: bool = False,
        kind: Optional[MatchKind] = None,
    ) -> list[MatchSpan]:
        """Scan text and optionally filter the matches.

        Args:
            text: Text to analyze.
            unique: Keep only the first match for each distinct text.
            kind: Keep only matches of this kind.

        Returns:
            List of MatchSpan objects in scan order.
        """
        links = []
        seen_texts = set()

        for span in self.scan(text):
            if kind is not None and span.kind != kind:
                continue

            # Skip duplicates
            if unique:
                if span.text in seen_texts:
                    continue
                seen_texts.add(span.text)

            links.append(span)

        return links

    def has_links(self, text: str) -> bool:
        """Check if text contains at least one URL or email."""
        return bool(self.scan(text))


_default_linkifier = Linkifier()


def linkify_text(text: str) -> list[MatchSpan]:
    """Scan text with a shared Linkifier.

    Linkifier holds no state, so sharing one instance is safe across threads.
    """
    return _default_linkifier.scan(text)
