"""
Pick the next guess from scored candidates.

- Highest elimination score wins.
- Ties go to the earliest candidate. Candidate sets are always subsequences
  of the dictionary, so this is also the earliest in dictionary order.
- With two or fewer candidates, nothing beats guessing one of them, so
  scoring is skipped.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from wordle_solve.errors import NoCandidatesRemaining

SHORTCUT_LIMIT = 2


def needs_scoring(candidates: Sequence[str]) -> bool:
    if not candidates:
        raise NoCandidatesRemaining()
    return len(candidates) > SHORTCUT_LIMIT


def best(candidates: Sequence[str], scores: Mapping[str, int]) -> str:
    """Max score; `max` keeps the first of equal keys, which is the tie-break."""
    if not candidates:
        raise NoCandidatesRemaining()
    return max(candidates, key=lambda w: scores[w])


def is_uniform(scores: Mapping[str, int]) -> bool:
    """True when scoring could not tell the candidates apart."""
    return len(scores) > SHORTCUT_LIMIT and len(set(scores.values())) == 1
