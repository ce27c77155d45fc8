"""Character normalization for typed German text.

Learners without a German keyboard type ``ue`` for ``ü``, ``B`` for ``ß`` or
``a/`` for ``ä``. The rules below rebuild the intended characters. They run
as a fixed, ordered pipeline: each rule scans the output of the previous
one, so the order of ``DEFAULT_RULES`` is part of the behaviour.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ..config import SHARP_S_VOWELS, VOWELS
from ..errors import ensure_text


# Punctuation removed before word alignment (ASCII, typographic quotes,
# guillemets, heavy quote ornaments and CJK corner brackets)
STRIP_PUNCTUATION = (
    ".,!?;:()\"'"
    "‘’‚‛“”„‟"
    "‹›«»"
    "❛❜❝❞"
    "「」『』"
)

# Punctuation shown (ungraded) by live feedback
LIVE_PUNCTUATION = {".", ",", "!", "?", ";", ":", "(", ")"}

_STRIP_RE = re.compile("[" + re.escape(STRIP_PUNCTUATION) + "]")

_UPPER_CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
_LOWER_CONSONANTS = _UPPER_CONSONANTS.lower()


def _not_after(chars: str) -> str:
    return "(?<![" + re.escape(chars) + "])"


def _after_consonant(consonants: str) -> str:
    # Either a consonant of the given case or the start of a word
    return "(?:(?<=[" + consonants + "])|\\b)"


@dataclass(frozen=True)
class RewriteRule:
    """One step of the normalization pipeline.

    Attributes:
        name: Short label, used in logs and tests
        pattern: Regex for the text to replace
        replacement: ``re.sub`` replacement template
        left_context: Lookbehind that must hold right before ``pattern``
    """

    name: str
    pattern: str
    replacement: str
    left_context: str = ""
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(self.left_context + self.pattern))

    def apply(self, text: str) -> str:
        return self.compiled.sub(self.replacement, text)


def _digraph_rules() -> Tuple[RewriteRule, ...]:
    # The "u" of "qu" is a consonant, so "qu" + "e" never spells "ü"
    no_vowel = _not_after(VOWELS)
    no_vowel_u = _not_after(VOWELS + "qQ")
    no_vowel_or_lower = _not_after(VOWELS) + "(?<![a-zß])"

    upper = _after_consonant(_UPPER_CONSONANTS)
    lower = _after_consonant(_LOWER_CONSONANTS)
    upper_u = _after_consonant(_UPPER_CONSONANTS.replace("Q", ""))
    lower_u = _after_consonant(_LOWER_CONSONANTS.replace("q", ""))

    return (
        # 1. plain lowercase digraphs
        RewriteRule("ue", "ue", "ü", no_vowel_u),
        RewriteRule("ae", "ae", "ä", no_vowel),
        RewriteRule("oe", "oe", "ö", no_vowel),
        # 2. capitalised digraphs at the start of a word or after capitals
        RewriteRule("Ue", "Ue", "Ü", no_vowel_or_lower),
        RewriteRule("Ae", "Ae", "Ä", no_vowel_or_lower),
        RewriteRule("Oe", "Oe", "Ö", no_vowel_or_lower),
        # 3. odd interior capitalisation, leading consonant kept as typed
        RewriteRule("UE after upper", "UE", "Ü", upper_u),
        RewriteRule("AE after upper", "AE", "Ä", upper),
        RewriteRule("OE after upper", "OE", "Ö", upper),
        RewriteRule("UE after lower", "UE", "Ü", lower_u),
        RewriteRule("AE after lower", "AE", "Ä", lower),
        RewriteRule("OE after lower", "OE", "Ö", lower),
        RewriteRule("Ue after upper", "Ue", "Ü", upper_u),
        RewriteRule("Ae after upper", "Ae", "Ä", upper),
        RewriteRule("Oe after upper", "Oe", "Ö", upper),
        RewriteRule("Ue after lower", "Ue", "ü", lower_u),
        RewriteRule("Ae after lower", "Ae", "ä", lower),
        RewriteRule("Oe after lower", "Oe", "ö", lower),
        RewriteRule("uE after lower", "uE", "ü", lower_u),
        RewriteRule("aE after lower", "aE", "ä", lower),
        RewriteRule("oE after lower", "oE", "ö", lower),
        RewriteRule("uE after upper", "uE", "ü", upper_u),
        RewriteRule("aE after upper", "aE", "ä", upper),
        RewriteRule("oE after upper", "oE", "ö", upper),
    )


def _sharp_s_rules() -> Tuple[RewriteRule, ...]:
    v = "[" + SHARP_S_VOWELS + "]"
    return (
        RewriteRule("B inside word", r"\B(" + v + ")B", r"\g<1>ß"),
        RewriteRule("B between vowels", "(" + v + ")B(" + v + ")", r"\g<1>ß\g<2>"),
        RewriteRule("B at end", "(" + v + ")B$", r"\g<1>ß"),
        RewriteRule("B before space", "(" + v + r")B(\s)", r"\g<1>ß\g<2>"),
    )


def _slash_rules() -> Tuple[RewriteRule, ...]:
    return tuple(
        RewriteRule(typed + "/", re.escape(typed + "/"), target)
        for typed, target in (("a", "ä"), ("o", "ö"), ("u", "ü"), ("s", "ß"), ("e", "é"))
    )


# German words that legitimately end in a rewritten digraph
EXCEPTIONS = (
    ("tü", "tue"),
    ("Getü", "Getue"),
    ("getü", "getue"),
    ("beqü", "bequem"),
    ("Beqü", "Bequem"),
)


def _exception_rules() -> Tuple[RewriteRule, ...]:
    return tuple(
        RewriteRule("exception " + word, re.escape(word) + r"(?!\w)", restored, r"(?<!\w)")
        for word, restored in EXCEPTIONS
    )


DEFAULT_RULES: Tuple[RewriteRule, ...] = (
    _digraph_rules() + _sharp_s_rules() + _slash_rules() + _exception_rules()
)


class CharacterNormalizer:
    """Rewrites ASCII substitute spellings into German special characters."""

    def __init__(self, rules: Iterable[RewriteRule] = DEFAULT_RULES):
        self.rules: Tuple[RewriteRule, ...] = tuple(rules)

    def normalize(self, text: str) -> str:
        """Apply every rewrite rule in order.

        Args:
            text: Raw text as typed by the learner

        Returns:
            Text with umlauts, ß and é reconstructed
        """
        ensure_text(text, "text")
        for rule in self.rules:
            text = rule.apply(text)
        return text


_DEFAULT_NORMALIZER = CharacterNormalizer()


def normalize_german(text: str) -> str:
    """Normalize ``text`` with the default rule set."""
    return _DEFAULT_NORMALIZER.normalize(text)


def is_punctuation(char: str) -> bool:
    """Check if a single character is punctuation shown by live feedback.

    Args:
        char: The character to check

    Returns:
        True for one of ``. , ! ? ; : ( )``
    """
    return char in LIVE_PUNCTUATION


def strip_punctuation(text: str) -> str:
    """Remove punctuation and quotation marks ignored by word comparison."""
    return _STRIP_RE.sub("", text)
