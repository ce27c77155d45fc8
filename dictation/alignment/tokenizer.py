"""Text preparation and word tokenization for alignment."""
from __future__ import annotations

import re
from typing import List

from .normalizer import strip_punctuation

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def prepare_for_display(text: str) -> str:
    """Punctuation-free, whitespace-collapsed text that keeps its casing.

    Example: '„Guten Tag“,  Anna!' -> 'Guten Tag Anna'
    """
    return collapse_whitespace(strip_punctuation(text))


def tokenize_words(text: str, ignore_case: bool = True) -> List[str]:
    """Split text into the words used for alignment.

    Punctuation is stripped and, when ``ignore_case`` is set, the words are
    lowercased. The words line up one to one with the words of
    ``prepare_for_display``, though lowercasing may change their lengths.

    Args:
        text: The text to tokenize
        ignore_case: Fold case before splitting

    Returns:
        List of non-empty words
    """
    text = strip_punctuation(text)
    if ignore_case:
        text = text.lower()
    return collapse_whitespace(text).split()
