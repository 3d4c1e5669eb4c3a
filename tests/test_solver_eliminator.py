import itertools

import pytest
from wordle_solve.datasets import dictionary_from_words
from wordle_solve.engine import score
from wordle_solve.errors import NoCandidatesRemaining
from wordle_solve.solvers import (
    EliminationSolver, best, elimination_score, is_uniform, needs_scoring, score_all,
)
from wordle_solve.solvers.eliminator import split_slices

WORDS = ["crane","raise","stare","trace","cared","racer","scoop","adieu","alone","level"]


def _rescan_score(guess, candidates):
    # per-pair definition: for each answer, count survivors of its pattern
    n = len(candidates)
    total = 0
    for ans in candidates:
        patt = score(guess, ans)
        k = sum(1 for w in candidates if score(guess, w) == patt)
        total += n - k
    return total


def test_grouping_matches_rescan():
    for g in WORDS:
        assert elimination_score(g, WORDS) == _rescan_score(g, WORDS)


def test_score_bounds():
    n = len(WORDS)
    for s in score_all(WORDS).values():
        assert 0 <= s <= n * (n - 1)


def test_score_all_keeps_candidate_order():
    assert list(score_all(WORDS)) == WORDS


def test_parallel_matches_sequential():
    words = ["".join(p) for p in itertools.product("abcde", repeat=3)]  # 125 words
    assert score_all(words, workers=2) == score_all(words, workers=1)


def test_split_slices_disjoint_and_complete():
    words = [str(i) for i in range(10)]
    slices = split_slices(words, 3)
    assert [w for s in slices for w in s] == words
    assert len(slices) == 3
    assert split_slices(words[:2], 8) == [["0"], ["1"]]


def test_best_breaks_ties_by_order():
    assert best(["b", "a", "c"], {"a": 5, "b": 5, "c": 1}) == "b"
    assert best(["b", "a", "c"], {"a": 6, "b": 5, "c": 1}) == "a"


def test_uniform_tie_detected():
    words = ["abc", "bca", "cab"]
    scores = score_all(words)
    assert scores == {"abc": 4, "bca": 4, "cab": 4}
    assert is_uniform(scores)


def test_small_sets_skip_scoring():
    assert needs_scoring(["fifty", "minty", "nifty"])
    assert not needs_scoring(["fifty", "minty"])
    with pytest.raises(NoCandidatesRemaining):
        needs_scoring([])


def test_solver_shortcut_two_left():
    solver = EliminationSolver(dictionary_from_words(["fifty", "minty"]))
    choice = solver.choose(["fifty", "minty"])
    assert choice.guess == "fifty"
    assert choice.scores == {}


def test_solver_remembers_first_guess():
    d = dictionary_from_words(WORDS)
    solver = EliminationSolver(d)
    first = solver.choose(list(d.words))
    assert first.scores
    assert solver.first_guess == d.words.index(first.guess)

    again = solver.choose(list(d.words))
    assert again.guess == first.guess
    assert again.scores == {}


def test_solver_ignores_out_of_range_first_guess():
    solver = EliminationSolver(dictionary_from_words(WORDS), first_guess=99)
    assert solver.first_guess is None


def test_uniform_opening_is_not_remembered():
    solver = EliminationSolver(dictionary_from_words(["abc", "bca", "cab"]))
    first = solver.choose(["abc", "bca", "cab"])
    assert first.no_best_guess is True
    assert solver.first_guess is None
    assert solver.choose(["abc", "bca", "cab"]).no_best_guess is True


def test_solver_reuses_one_pool_across_rounds():
    words = ["".join(p) for p in itertools.product("abcde", repeat=3)]
    with EliminationSolver(dictionary_from_words(words), workers=2) as solver:
        solver.choose(words)
        pool = solver._executor
        assert pool is not None

        subset = words[:100]
        choice = solver.choose(subset)
        assert solver._executor is pool
        assert choice.scores == score_all(subset)
    assert solver._executor is None


def test_small_rounds_stay_in_process():
    with EliminationSolver(dictionary_from_words(WORDS), workers=2) as solver:
        solver.choose(WORDS)
        assert solver._executor is None
