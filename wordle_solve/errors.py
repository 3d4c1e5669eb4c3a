"""
Exception hierarchy for wordle-solve.

Everything derives from WordleSolveError (itself a ValueError) so callers can
catch one type at the CLI boundary and print a one-line message.
"""


class WordleSolveError(ValueError):
    """Base class for all input/consistency errors raised by the package."""


class LengthMismatch(WordleSolveError):
    """A word, pattern or feedback row does not have the run's length L."""


class EmptyDictionary(WordleSolveError):
    """The dictionary has no usable words."""


class InvalidWord(WordleSolveError):
    """A dictionary line is not a sequence of letters."""


class FeedbackSyntaxError(WordleSolveError):
    """A feedback token could not be parsed."""


class NoCandidatesRemaining(WordleSolveError):
    """The feedback history is inconsistent with every dictionary word."""

    def __init__(self, message: str = "No words match those constraints."):
        super().__init__(message)
