"""Configuration values for the dictation comparison core."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentCosts:
    """Costs used by the word-level edit-distance aligner.

    Substitution (3) is cheaper than a delete + insert pair (2 + 2), so a
    single mistyped word is reported as one wrong word rather than as a
    missing word followed by an extra one.
    """

    match: int = 0
    substitute: int = 3
    insert: int = 2
    delete: int = 2


@dataclass(frozen=True)
class ComparisonOptions:
    """Per-call comparison options.

    Punctuation is always ignored by the full comparison and is not exposed.
    """

    ignore_case: bool = True


DEFAULT_COSTS = AlignmentCosts()
DEFAULT_OPTIONS = ComparisonOptions()

# Vowels that block digraph -> umlaut rewriting when they precede the digraph
VOWELS = "aeiouäöüAEIOUÄÖÜ"

# Lowercase vowels that may sit next to a typed "B" standing in for "ß"
SHARP_S_VOWELS = "aeiouäöü"

# Placeholder rendered for each character of an omitted reference word
MISSING_PLACEHOLDER = "_"
