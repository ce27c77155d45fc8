"""Data models shared by the comparison core and its consumers."""
from .aligned_word import AlignedWord, AlignmentOp
from .annotation import CharAnnotation, CharStats, CharStatus, ComparisonResult, LiveFeedback
from .sentence import SentenceResult, SessionSummary, WordStats

__all__ = [
    "AlignedWord",
    "AlignmentOp",
    "CharAnnotation",
    "CharStats",
    "CharStatus",
    "ComparisonResult",
    "LiveFeedback",
    "SentenceResult",
    "SessionSummary",
    "WordStats",
]
