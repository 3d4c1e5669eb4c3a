"""
Boundary checks for words and history entries.

The scoring and filtering code assumes every word and pattern has the run's
length L. These helpers enforce that before data reaches the engine, so the
hot loops never have to.
"""

from typing import Iterable, Tuple

from wordle_solve.errors import FeedbackSyntaxError, LengthMismatch
from .scoring import GREEN, YELLOW, GRAY

_MARKS = frozenset((GREEN, YELLOW, GRAY))


def check_word(word: str, N: int) -> str:
    """Return `word` unchanged, or raise LengthMismatch if len(word) != N."""
    if len(word) != N:
        raise LengthMismatch(f"{word!r} has {len(word)} letters, expected {N}")
    return word


def check_pattern(pattern: str, N: int) -> str:
    """Return `pattern` unchanged if it is N marks long and only uses G/Y/-."""
    if len(pattern) != N:
        raise LengthMismatch(f"pattern {pattern!r} has {len(pattern)} marks, expected {N}")
    bad = set(pattern) - _MARKS
    if bad:
        raise FeedbackSyntaxError(f"pattern {pattern!r} contains unknown marks {sorted(bad)}")
    return pattern


def check_history(history: Iterable[Tuple[str, str]], N: int) -> None:
    """Validate every (guess, pattern) entry against word length N."""
    for guess, pattern in history:
        check_word(guess, N)
        check_pattern(pattern, N)
