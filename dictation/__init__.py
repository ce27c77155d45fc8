"""
dictation

Grading of typed German dictation against a reference sentence:
- rebuilds umlauts and ß from ASCII substitute spellings (ue, ae, oe, B, a/)
- aligns user words to reference words with a weighted edit distance
- projects the alignment back onto the user's own text as graded characters
- keeps per-session word statistics and sentence timing
"""
from .config import AlignmentCosts, ComparisonOptions
from .errors import InvalidInput
from .alignment import CharacterNormalizer, SequenceAligner, align_sequences, normalize_german
from .scorer import TextComparison, compare_live_feedback, compare_texts
from .stats import SessionStatistics, calculate_word_stats

__all__ = [
    "AlignmentCosts",
    "CharacterNormalizer",
    "ComparisonOptions",
    "InvalidInput",
    "SequenceAligner",
    "SessionStatistics",
    "TextComparison",
    "align_sequences",
    "calculate_word_stats",
    "compare_live_feedback",
    "compare_texts",
    "normalize_german",
]
