"""
Candidate filtering given game history.

Given:
  - a pool of words (the dictionary, or an earlier candidate set)
  - a history of (guess, pattern) pairs

Return:
  - words that are consistent with ALL feedback seen so far.

A word survives iff scoring it as the answer against every past guess
reproduces the recorded pattern. `score` already encodes the duplicate-letter
rules, so no separate green/yellow/gray bookkeeping is needed here.
"""

from typing import Iterable, List, Sequence, Tuple

from .scoring import score

# History is a sequence of (guess, pattern) tuples.
History = Sequence[Tuple[str, str]]


def is_consistent(word: str, history: History) -> bool:
    """True if `word` would have produced every recorded pattern."""
    for g, patt in history:
        if score(g, word) != patt:
            return False
    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded patterns for
    every (guess, pattern) in `history`.

    Args:
      words   : iterable of candidate words, all of the run's length
      history : sequence of (guess, pattern) seen so far (any order)

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    return [w for w in words if is_consistent(w, history)]
