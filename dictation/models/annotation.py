"""Annotated character stream produced by the comparison engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class CharStatus(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    MISSING = "missing"
    EXTRA = "extra"
    PUNCTUATION = "punctuation"
    WORD_BOUNDARY = "word-boundary"
    CHAR_SPACE = "char-space"


# Statuses that belong to a word and carry its grade
ERROR_STATUSES = frozenset({CharStatus.WRONG, CharStatus.EXTRA, CharStatus.MISSING})
SPACING_STATUSES = frozenset({CharStatus.WORD_BOUNDARY, CharStatus.CHAR_SPACE})


@dataclass(frozen=True)
class CharAnnotation:
    """A single rendered character and its grade."""

    char: str
    status: CharStatus

    def to_dict(self) -> Dict[str, str]:
        return {"char": self.char, "status": self.status.value}


@dataclass(frozen=True)
class CharStats:
    """Character counts summed while building an annotation stream.

    ``correct``, ``wrong`` and ``extra`` count characters taken from the user
    text; ``missing`` counts placeholders for omitted reference characters.
    """

    correct: int = 0
    wrong: int = 0
    extra: int = 0
    missing: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "correct": self.correct,
            "wrong": self.wrong,
            "extra": self.extra,
            "missing": self.missing,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Output of the full (alignment based) comparison.

    Attributes:
        chars: Annotated character stream in display order
        stats: Aggregate character counts
        reference_chars: Total characters of the reference words
    """

    chars: Tuple[CharAnnotation, ...]
    stats: CharStats
    reference_chars: int = 0

    def visible_text(self) -> str:
        """Concatenate every annotation except word boundaries and char spaces."""
        return "".join(a.char for a in self.chars if a.status not in SPACING_STATUSES)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chars": [a.to_dict() for a in self.chars],
            "stats": dict(self.stats.to_dict(), total=self.reference_chars),
        }


@dataclass(frozen=True)
class LiveFeedback:
    """Output of the positional comparison shown while the user is typing."""

    chars: Tuple[CharAnnotation, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"chars": [a.to_dict() for a in self.chars]}
