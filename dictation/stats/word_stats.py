"""Word-level counts derived from an annotated character stream."""
from __future__ import annotations

from typing import Iterable

from ..models.annotation import ERROR_STATUSES, CharAnnotation, CharStatus
from ..models.sentence import WordStats


def calculate_word_stats(chars: Iterable[CharAnnotation]) -> WordStats:
    """Count correct and wrong words in a comparison's character stream.

    A word ends at each word boundary and at the end of the stream. It is
    wrong if any of its characters is wrong, extra or missing. Punctuation
    and char spaces neither start nor end a word.

    Args:
        chars: ComparisonResult.chars

    Returns:
        WordStats with correct, wrong and total word counts
    """
    correct_words = 0
    wrong_words = 0
    in_word = False
    has_error = False

    for a in chars:
        if a.status is CharStatus.WORD_BOUNDARY:
            if in_word:
                if has_error:
                    wrong_words += 1
                else:
                    correct_words += 1
            in_word = False
            has_error = False
        elif a.status in ERROR_STATUSES:
            in_word = True
            has_error = True
        elif a.status is CharStatus.CORRECT:
            in_word = True

    if in_word:
        if has_error:
            wrong_words += 1
        else:
            correct_words += 1

    return WordStats(
        correct_words=correct_words,
        wrong_words=wrong_words,
        total_words=correct_words + wrong_words,
    )
