"""Per-sentence and per-session result records."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .annotation import ComparisonResult


@dataclass(frozen=True)
class WordStats:
    correct_words: int = 0
    wrong_words: int = 0
    total_words: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "correct_words": self.correct_words,
            "wrong_words": self.wrong_words,
            "total_words": self.total_words,
        }


@dataclass(frozen=True)
class SentenceResult:
    """Result of one submitted sentence. Owned by a single session.

    Attributes:
        sentence_index: Position of the sentence in the lesson
        reference: Reference sentence
        user_input: Raw text typed by the user
        comparison: Annotated comparison of the two
        word_stats: Word counts derived from ``comparison``
        elapsed_seconds: Time from first keystroke to submission
        timestamp: Wall-clock time the result was recorded (epoch seconds)
    """
    sentence_index: int
    reference: str
    user_input: str
    comparison: ComparisonResult
    word_stats: WordStats
    elapsed_seconds: float
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentence_index": self.sentence_index,
            "reference": self.reference,
            "user_input": self.user_input,
            "comparison": self.comparison.to_dict(),
            "word_stats": self.word_stats.to_dict(),
            "elapsed_seconds": self.elapsed_seconds,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class SessionSummary:
    total_correct_words: int
    total_wrong_words: int
    total_words: int
    accuracy: int
    total_time: float
    sentence_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_correct_words": self.total_correct_words,
            "total_wrong_words": self.total_wrong_words,
            "total_words": self.total_words,
            "accuracy": self.accuracy,
            "total_time": self.total_time,
            "sentence_count": self.sentence_count,
        }
