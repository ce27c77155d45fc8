"""Word statistics and session bookkeeping."""
from .session import SessionStatistics
from .word_stats import calculate_word_stats

__all__ = ["SessionStatistics", "calculate_word_stats"]
