"""
Elimination-count scoring.

Idea:
  Use the CURRENT candidate set R both as the guess pool and as the set of
  possible answers. For guess g, partition R into buckets by feedback pattern.
  If the answer sits in a bucket of size k, seeing that pattern leaves k words
  and eliminates |R| - k. Summed over every possible answer:

      score(g) = sum over buckets of k * (|R| - k)

  Higher is better. 0 <= score(g) <= |R| * (|R| - 1).

  Bucketing costs one pattern per (guess, answer) pair, so scoring all of R is
  O(|R|^2) pattern computations. Each guess is independent, so R can be split
  into slices and scored by a process pool.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import Executor, ProcessPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from wordle_solve.engine import score as score_fn

log = logging.getLogger(__name__)

# Below this many candidates, pool start-up costs more than it saves.
MIN_PARALLEL = 64

# Slices per worker; more slices give a smoother progress bar.
SLICES_PER_WORKER = 4


def pattern_buckets(guess: str, candidates: Sequence[str]) -> Dict[str, int]:
    """Map each feedback pattern to how many candidates produce it."""
    buckets: Dict[str, int] = defaultdict(int)
    # localize for speed
    _score = score_fn
    for ans in candidates:
        buckets[_score(guess, ans)] += 1
    return buckets


def elimination_score(guess: str, candidates: Sequence[str]) -> int:
    n = len(candidates)
    return sum(k * (n - k) for k in pattern_buckets(guess, candidates).values())


def _score_slice(guesses: List[str], candidates: List[str]) -> Dict[str, int]:
    # Module-level so ProcessPoolExecutor can pickle it.
    return {g: elimination_score(g, candidates) for g in guesses}


def split_slices(words: List[str], parts: int) -> List[List[str]]:
    """Split into at most `parts` contiguous, disjoint, non-empty slices."""
    parts = max(1, min(parts, len(words)))
    size, extra = divmod(len(words), parts)
    out, start = [], 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        out.append(words[start:end])
        start = end
    return [s for s in out if s]


def _score_parallel(ex: Executor, words: List[str], workers: int,
                    progress: bool) -> Dict[str, int]:
    slices = split_slices(words, workers * SLICES_PER_WORKER)
    log.debug(f"Scoring {len(words)} candidates in {len(slices)} slices on {workers} workers")

    merged: Dict[str, int] = {}
    bar = tqdm(total=len(words), ncols=80, desc="Scoring", unit="word", leave=False) if progress else None
    try:
        futures = [ex.submit(_score_slice, s, words) for s in slices]
        for fut in as_completed(futures):
            part = fut.result()
            merged.update(part)
            if bar is not None:
                bar.update(len(part))
    finally:
        if bar is not None:
            bar.close()

    # Slices finish in any order; hand back candidate order.
    return {g: merged[g] for g in words}


def score_all(candidates: Sequence[str], *, workers: int = 1, progress: bool = False,
              executor: Optional[Executor] = None) -> Dict[str, int]:
    """
    Elimination score for every candidate acting as the guess.

    Args:
      candidates : current candidate set R (guess pool == answer pool)
      workers    : process count; 1 scores in-process
      progress   : show a tqdm bar on stderr
      executor   : pool to reuse across rounds; a private one is created
                   (and shut down) when omitted

    Returns:
      dict word -> score, iterating in the same order as `candidates`.
    """
    words = list(candidates)
    if workers <= 1 or len(words) < MIN_PARALLEL:
        it = tqdm(words, ncols=80, desc="Scoring", unit="word", leave=False) if progress else words
        return {g: elimination_score(g, words) for g in it}

    if executor is not None:
        return _score_parallel(executor, words, workers, progress)
    with ProcessPoolExecutor(max_workers=workers) as ex:
        return _score_parallel(ex, words, workers, progress)
