"""Alignment orchestration between a reference sentence and user input."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.aligned_word import AlignedWord
from .edit_distance import SequenceAligner
from .tokenizer import prepare_for_display, tokenize_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordAlignment:
    """Word alignment plus the user text it is projected back onto.

    Attributes:
        ops: Alignment steps in sentence order
        ref_words: Reference words as compared
        user_words: User words as compared
        user_display: User text without punctuation, original casing, single spaces
    """
    ops: List[AlignedWord]
    ref_words: List[str]
    user_words: List[str]
    user_display: str


def align_reference_to_user(
    reference_text: str,
    user_text: str,
    *,
    ignore_case: bool = True,
    aligner: Optional[SequenceAligner] = None,
) -> WordAlignment:
    """Align already-normalized user text to the reference sentence.

    Args:
        reference_text: The reference sentence
        user_text: User input after character normalization
        ignore_case: Compare words case-insensitively
        aligner: Aligner to use (default costs when omitted)

    Returns:
        WordAlignment with the steps and the display copy of the user text
    """
    aligner = aligner or SequenceAligner()
    ref_words = tokenize_words(reference_text, ignore_case)
    user_words = tokenize_words(user_text, ignore_case)

    ops = aligner.align(ref_words, user_words)
    logger.debug("aligned %d reference words to %d user words in %d steps",
                 len(ref_words), len(user_words), len(ops))
    return WordAlignment(
        ops=ops,
        ref_words=ref_words,
        user_words=user_words,
        user_display=prepare_for_display(user_text),
    )
