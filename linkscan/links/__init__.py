"""Link detection and text segmentation."""

from .charclass import CharClass, classify, is_hard_terminator, is_soft_terminator
from .detector import Linkifier, linkify_text
from .segments import split_segments

__all__ = [
    "CharClass",
    "Linkifier",
    "classify",
    "is_hard_terminator",
    "is_soft_terminator",
    "linkify_text",
    "split_segments",
]
