"""Character-level comparison of user input against a reference sentence."""
from .text_comparison import TextComparison, compare_live_feedback, compare_texts

__all__ = ["TextComparison", "compare_live_feedback", "compare_texts"]
