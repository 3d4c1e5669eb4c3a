"""
Wordle-style feedback for a single (guess, answer) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

This implementation is:
  - length-agnostic (any L, taken from the inputs)
  - Unicode-aware (a letter is one code point; no case folding here)
  - duplicate-safe (never marks more G+Y copies of a letter than the answer has)
  - pure (the letter counter is local to each call)

Algorithm (two-pass, canonical for Wordle):
  1) Count every letter of the answer, then mark all greens and consume
     their counts.
  2) Mark yellows only while the letter still has remaining count.
"""

from collections import Counter

from wordle_solve.errors import LengthMismatch

GREEN = "G"
YELLOW = "Y"
GRAY = "-"


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Raises:
      LengthMismatch if the two words differ in length.

    Returns:
      string of length L composed only of 'G', 'Y', '-'

    Examples:
      score("belle", "level") -> "-GYYY"
      score("sheep", "speed") -> "G-GGY"
    """
    n = len(guess)
    if len(answer) != n:
        raise LengthMismatch(
            f"guess {guess!r} has {n} letters but answer {answer!r} has {len(answer)}")

    pattern = [GRAY] * n
    remaining = Counter(answer)

    # Pass 1: greens consume their letter before any yellow is handed out.
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
            remaining[g] -= 1

    # Pass 2: yellows capped by whatever count is left.
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)


def all_green(n: int) -> str:
    """Pattern of a solved row for word length n."""
    return GREEN * n
