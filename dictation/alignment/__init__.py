"""Normalization and alignment utilities for matching reference text to user input."""
from .aligner import WordAlignment, align_reference_to_user
from .edit_distance import SequenceAligner, align_sequences, alignment_cost
from .normalizer import CharacterNormalizer, RewriteRule, normalize_german
from .tokenizer import tokenize_words

__all__ = [
    "CharacterNormalizer",
    "RewriteRule",
    "SequenceAligner",
    "WordAlignment",
    "align_reference_to_user",
    "align_sequences",
    "alignment_cost",
    "normalize_german",
    "tokenize_words",
]
