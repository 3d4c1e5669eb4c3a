from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from wordle_solve.datasets import Dictionary
from .eliminator import MIN_PARALLEL, score_all
from .ranking import best, is_uniform, needs_scoring

log = logging.getLogger(__name__)


@dataclass
class Choice:
    guess: str
    scores: Dict[str, int] = field(default_factory=dict)
    no_best_guess: bool = False


class EliminationSolver:
    id = "eliminator"
    name = "Elimination Count"
    version = "1.0.0"

    def __init__(self, dictionary: Dictionary, *, workers: int = 1, progress: bool = False,
                 first_guess: Optional[int] = None):
        self.dictionary = dictionary
        self.workers = int(workers)
        self.progress = progress
        self._index = {w: i for i, w in enumerate(dictionary.words)}
        self._executor: Optional[ProcessPoolExecutor] = None
        self.first_guess: Optional[int] = None
        if first_guess is not None:
            self.remember_first_guess(first_guess)

    def __enter__(self) -> "EliminationSolver":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the scoring pool, if one was started."""
        if self._executor is not None:
            self._executor.shutdown()
            self._executor = None

    def _pool(self) -> Optional[ProcessPoolExecutor]:
        # Started on first use and kept for every later round and game.
        if self.workers <= 1:
            return None
        if self._executor is None:
            self._executor = ProcessPoolExecutor(max_workers=self.workers)
        return self._executor

    @property
    def words(self) -> Sequence[str]:
        return self.dictionary.words

    @property
    def N(self) -> int:
        return self.dictionary.length

    def remember_first_guess(self, index: int) -> None:
        """Adopt a cached opening guess if it points inside this dictionary."""
        if 0 <= index < len(self.words):
            self.first_guess = index
        else:
            log.warning(f"Ignoring cached first guess index {index} "
                        f"(dictionary has {len(self.words)} words)")

    def choose(self, candidates: List[str]) -> Choice:
        """
        Pick the next guess among `candidates` (a subsequence of the dictionary).

        Raises NoCandidatesRemaining on an empty list.
        """
        if not needs_scoring(candidates):
            return Choice(guess=candidates[0])

        opening = len(candidates) == len(self.words)
        if opening and self.first_guess is not None:
            guess = self.words[self.first_guess]
            log.info(f"Using remembered first guess {guess!r}")
            return Choice(guess=guess)

        log.info(f"Scoring {len(candidates)} candidates")
        executor = self._pool() if len(candidates) >= MIN_PARALLEL else None
        scores = score_all(candidates, workers=self.workers, progress=self.progress,
                           executor=executor)
        guess = best(candidates, scores)
        log.debug(f"Best guess {guess!r} scores {scores[guess]}")
        uniform = is_uniform(scores)

        # A uniform tie has no opening worth remembering; rescoring keeps the
        # signal identical on every run.
        if opening and not uniform:
            self.first_guess = self._index[guess]
        return Choice(guess=guess, scores=scores, no_best_guess=uniform)
