"""Data model for aligned words between the reference sentence and user input."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AlignmentOp(str, Enum):
    """Edit operation relating a reference word to a user word."""

    MATCH = "match"
    SUBSTITUTE = "substitute"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class AlignedWord:
    """Represents one step of a word alignment.

    Attributes:
        op: The edit operation
        ref_word: Word from the reference sentence (None for inserts)
        user_word: Word typed by the user (None for deletes)
    """
    op: AlignmentOp
    ref_word: Optional[str]
    user_word: Optional[str]
