from linkscan import linkify_text
from linkscan.links.charclass import (
    CharClass,
    URL_SCHEMES,
    classify,
    is_hard_terminator,
    is_soft_terminator,
)


def test_whitespace_and_bidi_controls_are_hard():
    for ch in [" ", "\n", "\t", "\r", "\u200e", "\u200f", "\u202a", "\u202b", "\u202c", "\u202d", "\u202e"]:
        assert is_hard_terminator(ch), repr(ch)
        assert classify(ch) == CharClass.HARD_TERMINATOR


def test_non_breaking_space_is_ordinary():
    assert not is_hard_terminator("\u00a0")
    assert classify("\u00a0") == CharClass.ORDINARY


def test_punctuation_and_quotes_are_soft():
    for ch in ".,:;!'\"«»‘’“”‚„‹›":
        assert is_soft_terminator(ch), repr(ch)
        assert classify(ch) == CharClass.SOFT_TERMINATOR


def test_question_mark_classifies_as_path():
    # Soft terminator too, but path chars take precedence
    assert is_soft_terminator("?")
    assert classify("?") == CharClass.PATH


def test_path_chars():
    assert classify("/") == CharClass.PATH
    assert classify("#") == CharClass.PATH


def test_brackets():
    for ch in "([{":
        assert classify(ch) == CharClass.OPENING_BRACKET
    for ch in ")]}":
        assert classify(ch) == CharClass.CLOSING_BRACKET


def test_ordinary_chars():
    for ch in "aZ9-_=&%例":
        assert classify(ch) == CharClass.ORDINARY


def test_scheme_order():
    assert URL_SCHEMES == ("http://", "https://", "ftp://", "ftps://", "mailto:")


def test_trailing_scan_follows_classification():
    # Every class decides where the URL ends
    spans = linkify_text("example.com/a(b)c[d]?x#y. done")
    assert spans[0].text == "http://example.com/a(b)c[d]?x#y"
