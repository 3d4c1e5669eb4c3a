"""
Round controller and simulation harness.

- solve_round: one invocation of the tool. Replay the history over the full
               dictionary, then ask the solver for the next guess.
- run_case:    play the solver against a known answer until it wins.
- run_batch:   run_case over many answers (the full self-test).

These functions are UI-agnostic; the CLI formats whatever they return.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from wordle_solve.engine import all_green, check_history, check_word, filter_candidates, score
from wordle_solve.errors import NoCandidatesRemaining
from wordle_solve.solvers import EliminationSolver

log = logging.getLogger(__name__)

# The tool itself imposes no turn limit; this only stops a runaway simulation.
DEFAULT_MAX_TURNS = 100


@dataclass
class RoundResult:
    remaining: List[str]     # candidate set, dictionary order
    total: int               # dictionary size
    guess: Optional[str]     # suggested next guess
    no_best_guess: bool = False
    scores: Dict[str, int] = field(default_factory=dict)


def solve_round(solver: EliminationSolver, history: Sequence[Tuple[str, str]]) -> RoundResult:
    """
    Filter the dictionary by `history` and pick the next guess.

    Raises:
      LengthMismatch        a history entry does not match the dictionary's L
      NoCandidatesRemaining no dictionary word fits the history
    """
    check_history(history, solver.N)
    remaining = filter_candidates(solver.words, history)
    log.info(f"{len(remaining)}/{len(solver.words)} words remaining")
    if not remaining:
        raise NoCandidatesRemaining()

    choice = solver.choose(remaining)
    return RoundResult(
        remaining=remaining,
        total=len(solver.words),
        guess=choice.guess,
        no_best_guess=choice.no_best_guess,
        scores=choice.scores,
    )


def run_case(solver: EliminationSolver, answer: str, *,
             max_turns: int = DEFAULT_MAX_TURNS) -> Dict:
    """
    Play one game against a known `answer`.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)])
    """
    check_word(answer, solver.N)
    solved = all_green(solver.N)
    history: List[Tuple[str, str]] = []

    t0 = time.perf_counter()
    success = False
    for _ in range(max_turns):
        try:
            guess = solve_round(solver, history).guess
        except NoCandidatesRemaining:
            # Only reachable when the answer is not in the dictionary.
            log.warning(f"No candidates left for {answer!r} after {len(history)} guesses")
            break
        patt = score(guess, answer)
        history.append((guess, patt))
        if patt == solved:
            success = True
            break
    else:
        log.warning(f"Abandoning {answer!r} after {max_turns} guesses")

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
    }


def run_batch(solver: EliminationSolver, answers: Iterable[str], *,
              max_turns: int = DEFAULT_MAX_TURNS, progress: bool = False) -> List[Dict]:
    """
    Run many cases back-to-back. The solver keeps its first guess between
    games, so the opening is only scored once.
    """
    pool = list(answers)
    iterator = tqdm(pool, ncols=80, desc="Running", unit="game") if progress else pool
    return [run_case(solver, ans, max_turns=max_turns) for ans in iterator]


def guess_histogram(results: Iterable[Dict]) -> Dict[int, int]:
    """Number of guesses -> number of games, sorted by guess count."""
    counts = Counter(r["guesses"] for r in results)
    return dict(sorted(counts.items()))
