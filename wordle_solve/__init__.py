"""Suggest the next guess in a Wordle-style game by elimination count."""

from .errors import (
    WordleSolveError, LengthMismatch, EmptyDictionary, InvalidWord,
    FeedbackSyntaxError, NoCandidatesRemaining,
)
from .engine import score, filter_candidates, parse_row
from .datasets import Dictionary, load_dictionary, dictionary_from_words
from .solvers import EliminationSolver, score_all, best
from .harness import RoundResult, solve_round

__version__ = "1.0.0"

__all__ = [
    "WordleSolveError", "LengthMismatch", "EmptyDictionary", "InvalidWord",
    "FeedbackSyntaxError", "NoCandidatesRemaining",
    "score", "filter_candidates", "parse_row",
    "Dictionary", "load_dictionary", "dictionary_from_words",
    "EliminationSolver", "score_all", "best",
    "RoundResult", "solve_round",
]
