"""Character classification for the trailing-content scan."""

from enum import Enum


class CharClass(Enum):
    """How a character affects where a link ends."""

    HARD_TERMINATOR = "hard_terminator"
    SOFT_TERMINATOR = "soft_terminator"
    OPENING_BRACKET = "opening_bracket"
    CLOSING_BRACKET = "closing_bracket"
    PATH = "path"
    ORDINARY = "ordinary"


# Checked in this order at each scan position
URL_SCHEMES = ("http://", "https://", "ftp://", "ftps://", "mailto:")

PATH_QUERY_FRAGMENT_CHARS = frozenset("/?#")

HARD_TERMINATORS = frozenset(
    [
        " ",
        "\n",
        "\t",
        "\r",
        # Bidirectional formatting controls
        "\u200e",
        "\u200f",
        "\u202a",
        "\u202b",
        "\u202c",
        "\u202d",
        "\u202e",
    ]
)

SOFT_TERMINATORS = frozenset(
    [".", ",", ":", ";", "?", "!", "'", '"', "«", "»", "‘", "’", "“", "”", "‚", "„", "‹", "›"]
)

# Closing bracket -> opening bracket
BRACKET_PAIRS = {
    ")": "(",
    "]": "[",
    "}": "{",
}

OPENING_BRACKETS = frozenset(BRACKET_PAIRS.values())


def is_hard_terminator(ch: str) -> bool:
    return ch in HARD_TERMINATORS


def is_soft_terminator(ch: str) -> bool:
    return ch in SOFT_TERMINATORS


def classify(ch: str) -> CharClass:
    """Classify a single character.

    Path characters win over soft terminators, so ``?`` is always PATH.
    """
    if ch in HARD_TERMINATORS:
        return CharClass.HARD_TERMINATOR
    if ch in PATH_QUERY_FRAGMENT_CHARS:
        return CharClass.PATH
    if ch in SOFT_TERMINATORS:
        return CharClass.SOFT_TERMINATOR
    if ch in BRACKET_PAIRS:
        return CharClass.CLOSING_BRACKET
    if ch in OPENING_BRACKETS:
        return CharClass.OPENING_BRACKET
    return CharClass.ORDINARY
