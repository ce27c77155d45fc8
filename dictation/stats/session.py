"""Session state: recorded sentence results, totals and sentence timing."""
from __future__ import annotations

import dataclasses
import logging
import math
import time
from typing import Callable, List, Optional

from ..config import ComparisonOptions
from ..errors import InvalidInput
from ..models.sentence import SentenceResult, SessionSummary
from ..scorer.text_comparison import TextComparison
from .word_stats import calculate_word_stats

logger = logging.getLogger(__name__)

ResultObserver = Callable[[SentenceResult], None]


class SessionStatistics:
    """Owns the results of one learner session.

    Sentence time runs from the first keystroke of a sentence (not from when
    the sentence was shown) until its result is recorded. Instances are not
    shared between sessions.

    Args:
        engine: Comparison engine used to grade submitted sentences
        clock: Monotonic clock for sentence timing, in seconds
        wall_clock: Clock used for result timestamps, in epoch seconds
    """

    def __init__(
        self,
        engine: Optional[TextComparison] = None,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
    ):
        self.engine = engine or TextComparison()
        self._clock = clock
        self._wall_clock = wall_clock
        self._results: List[SentenceResult] = []
        self._observers: List[ResultObserver] = []
        self.total_session_time = 0.0
        self.has_started_typing = False
        self.sentence_start_time: Optional[float] = None

    def subscribe(self, observer: ResultObserver) -> None:
        """Call ``observer`` with every result recorded from now on."""
        self._observers.append(observer)

    def unsubscribe(self, observer: ResultObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def start_sentence_timing(self) -> None:
        """Mark the first keystroke of the current sentence. Later calls are no-ops."""
        if not self.has_started_typing:
            self.has_started_typing = True
            self.sentence_start_time = self._clock()

    def reset_sentence_timing(self) -> None:
        self.has_started_typing = False
        self.sentence_start_time = None

    def record_sentence_result(
        self,
        sentence_index: int,
        reference: str,
        user_input: str,
        options: Optional[ComparisonOptions] = None,
    ) -> SentenceResult:
        """Grade a submitted sentence and add it to the session.

        Args:
            sentence_index: Position of the sentence in the lesson
            reference: Reference sentence
            user_input: Raw text typed by the user
            options: Comparison options

        Returns:
            The recorded SentenceResult
        """
        if isinstance(sentence_index, bool) or not isinstance(sentence_index, int):
            raise InvalidInput(f"sentence_index must be int, got {type(sentence_index).__name__}")

        comparison = self.engine.compare_texts(reference, user_input, options)

        elapsed = 0.0
        if self.has_started_typing and self.sentence_start_time is not None:
            elapsed = max(0.0, self._clock() - self.sentence_start_time)
            self.total_session_time += elapsed

        result = SentenceResult(
            sentence_index=sentence_index,
            reference=reference,
            user_input=user_input,
            comparison=comparison,
            word_stats=calculate_word_stats(comparison.chars),
            elapsed_seconds=elapsed,
            timestamp=self._wall_clock(),
        )
        self._results.append(result)
        self.reset_sentence_timing()
        logger.debug(
            "recorded sentence %d: %d/%d words correct in %.1fs",
            sentence_index, result.word_stats.correct_words, result.word_stats.total_words, elapsed,
        )

        for observer in list(self._observers):
            observer(result)
        return result

    def add_result(self, result: SentenceResult) -> SentenceResult:
        """Append an already built result without touching sentence timing."""
        if not isinstance(result, SentenceResult):
            raise InvalidInput(f"result must be SentenceResult, got {type(result).__name__}")
        stamped = dataclasses.replace(result, timestamp=self._wall_clock())
        self._results.append(stamped)
        return stamped

    def calculate_overall_stats(self) -> SessionSummary:
        total_correct = sum(r.word_stats.correct_words for r in self._results)
        total_wrong = sum(r.word_stats.wrong_words for r in self._results)
        total_words = sum(r.word_stats.total_words for r in self._results)
        # Halves round up
        accuracy = math.floor(100 * total_correct / total_words + 0.5) if total_words > 0 else 0

        return SessionSummary(
            total_correct_words=total_correct,
            total_wrong_words=total_wrong,
            total_words=total_words,
            accuracy=accuracy,
            total_time=self.total_session_time,
            sentence_count=len(self._results),
        )

    @property
    def session_results(self) -> List[SentenceResult]:
        return list(self._results)

    @property
    def session_time(self) -> float:
        return self.total_session_time

    @property
    def sentence_count(self) -> int:
        return len(self._results)

    @property
    def has_started_current_sentence(self) -> bool:
        return self.has_started_typing

    def get_sentence_stats(self, index: int) -> Optional[SentenceResult]:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidInput(f"index must be int, got {type(index).__name__}")
        if 0 <= index < len(self._results):
            return self._results[index]
        return None

    def clear(self) -> None:
        """Forget every result and reset all timing."""
        self._results = []
        self.total_session_time = 0.0
        self.reset_sentence_timing()
