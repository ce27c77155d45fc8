"""Character-level grading of a typed sentence against its reference."""
from __future__ import annotations

from typing import List, Optional

from ..alignment.aligner import align_reference_to_user
from ..alignment.edit_distance import SequenceAligner
from ..alignment.normalizer import CharacterNormalizer, is_punctuation
from ..config import DEFAULT_OPTIONS, MISSING_PLACEHOLDER, ComparisonOptions
from ..errors import InvalidInput, ensure_text
from ..models.aligned_word import AlignmentOp
from ..models.annotation import (
    CharAnnotation,
    CharStats,
    CharStatus,
    ComparisonResult,
    LiveFeedback,
)

_STATUS_FOR_OP = {
    AlignmentOp.MATCH: CharStatus.CORRECT,
    AlignmentOp.SUBSTITUTE: CharStatus.WRONG,
    AlignmentOp.INSERT: CharStatus.EXTRA,
}


def _check_options(options: Optional[ComparisonOptions]) -> ComparisonOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if not isinstance(options, ComparisonOptions):
        raise InvalidInput(f"options must be ComparisonOptions, got {type(options).__name__}")
    return options


class TextComparison:
    """Compares user input with a reference sentence.

    Args:
        normalizer: Rebuilds umlauts and ß in the user input
        aligner: Word aligner used by the full comparison
    """

    def __init__(
        self,
        normalizer: Optional[CharacterNormalizer] = None,
        aligner: Optional[SequenceAligner] = None,
    ):
        self.normalizer = normalizer or CharacterNormalizer()
        self.aligner = aligner or SequenceAligner()

    def compare_texts(
        self, reference: str, user_input: str, options: Optional[ComparisonOptions] = None
    ) -> ComparisonResult:
        """Word-aligned comparison used to grade a submitted sentence.

        The user's words are aligned to the reference words, then the
        alignment is projected back onto the user's own text so the result
        shows what was typed (casing included), not the folded copy.

        Args:
            reference: The reference sentence
            user_input: Raw text typed by the user
            options: Comparison options (case is ignored by default)

        Returns:
            ComparisonResult with the annotated character stream and counts
        """
        ensure_text(reference, "reference")
        ensure_text(user_input, "user_input")
        options = _check_options(options)

        normalized = self.normalizer.normalize(user_input)
        alignment = align_reference_to_user(
            reference, normalized, ignore_case=options.ignore_case, aligner=self.aligner
        )
        # Case folding can change a word's length ("İ".lower() is two
        # characters), so the cursor walks display words, not characters.
        display_words = alignment.user_display.split(" ") if alignment.user_display else []

        chars: List[CharAnnotation] = []
        counts = {CharStatus.CORRECT: 0, CharStatus.WRONG: 0, CharStatus.EXTRA: 0, CharStatus.MISSING: 0}
        word_pos = 0

        for idx, a in enumerate(alignment.ops):
            if idx > 0:
                chars.append(CharAnnotation(" ", CharStatus.WORD_BOUNDARY))

            if a.op is AlignmentOp.DELETE:
                # Omitted words take no characters from the user text
                for k in range(len(a.ref_word)):
                    if k > 0:
                        chars.append(CharAnnotation(" ", CharStatus.CHAR_SPACE))
                    chars.append(CharAnnotation(MISSING_PLACEHOLDER, CharStatus.MISSING))
                    counts[CharStatus.MISSING] += 1
                continue

            status = _STATUS_FOR_OP[a.op]
            shown = display_words[word_pos] if word_pos < len(display_words) else a.user_word
            word_pos += 1
            for ch in shown:
                chars.append(CharAnnotation(ch, status))
                counts[status] += 1

        stats = CharStats(
            correct=counts[CharStatus.CORRECT],
            wrong=counts[CharStatus.WRONG],
            extra=counts[CharStatus.EXTRA],
            missing=counts[CharStatus.MISSING],
        )
        return ComparisonResult(
            chars=tuple(chars),
            stats=stats,
            reference_chars=sum(len(w) for w in alignment.ref_words),
        )

    def compare_live_feedback(
        self, reference: str, user_input: str, options: Optional[ComparisonOptions] = None
    ) -> LiveFeedback:
        """Positional comparison shown while the user is still typing.

        Walks the reference one character at a time. Reference punctuation is
        passed through ungraded and spaces become word boundaries; every other
        reference character is compared with the next user character that is
        neither punctuation nor whitespace. Nothing is realigned.
        """
        ensure_text(reference, "reference")
        ensure_text(user_input, "user_input")
        options = _check_options(options)

        typed = self.normalizer.normalize(user_input)
        chars: List[CharAnnotation] = []
        pos = 0

        for ref_char in reference:
            if is_punctuation(ref_char):
                chars.append(CharAnnotation(ref_char, CharStatus.PUNCTUATION))
                continue
            if ref_char.isspace():
                chars.append(CharAnnotation(" ", CharStatus.WORD_BOUNDARY))
                continue

            while pos < len(typed) and (is_punctuation(typed[pos]) or typed[pos].isspace()):
                pos += 1

            if pos >= len(typed):
                chars.append(CharAnnotation(MISSING_PLACEHOLDER, CharStatus.MISSING))
                continue

            user_char = typed[pos]
            if options.ignore_case:
                same = ref_char.lower() == user_char.lower()
            else:
                same = ref_char == user_char
            if same:
                chars.append(CharAnnotation(ref_char, CharStatus.CORRECT))
            else:
                chars.append(CharAnnotation(user_char, CharStatus.WRONG))
            pos += 1

        return LiveFeedback(chars=tuple(chars))


_DEFAULT_ENGINE = TextComparison()


def compare_texts(
    reference: str, user_input: str, options: Optional[ComparisonOptions] = None
) -> ComparisonResult:
    """Same as TextComparison.compare_texts with the default engine."""
    return _DEFAULT_ENGINE.compare_texts(reference, user_input, options)


def compare_live_feedback(
    reference: str, user_input: str, options: Optional[ComparisonOptions] = None
) -> LiveFeedback:
    """Same as TextComparison.compare_live_feedback with the default engine."""
    return _DEFAULT_ENGINE.compare_live_feedback(reference, user_input, options)
