from .scoring import score, all_green, GREEN, YELLOW, GRAY
from .constraints import filter_candidates, is_consistent
from .validation import check_word, check_pattern, check_history
from .tokens import parse_row, format_row

__all__ = [
    "score", "all_green", "GREEN", "YELLOW", "GRAY",
    "filter_candidates", "is_consistent",
    "check_word", "check_pattern", "check_history",
    "parse_row", "format_row",
]
