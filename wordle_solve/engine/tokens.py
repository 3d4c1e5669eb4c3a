"""
Parse a textual feedback row into a (guess, pattern) history entry.

A row is L whitespace-separated tokens, one per position. Each token is an
optional prefix followed by exactly one letter:

    -x   gray
    ~x   yellow
     x   green (no prefix)

Example: "-r -a ~i -s -e" -> ("raise", "--Y--")
"""

import unicodedata
from typing import List, Tuple

from wordle_solve.errors import FeedbackSyntaxError, LengthMismatch
from .scoring import GREEN, YELLOW, GRAY

PREFIXES = {"-": GRAY, "~": YELLOW}


def parse_token(token: str) -> Tuple[str, str]:
    """Return (letter, mark) for one token such as '~i'."""
    mark = GREEN
    body = token
    if body[:1] in PREFIXES:
        mark = PREFIXES[body[0]]
        body = body[1:]
    # Same normalization the dictionary loader applies.
    body = unicodedata.normalize("NFC", body).lower()
    if len(body) != 1 or not body.isalpha():
        raise FeedbackSyntaxError(
            f"bad feedback token {token!r}: expected an optional '-' or '~' followed by one letter")
    return body, mark


def parse_row(row: str, N: int) -> Tuple[str, str]:
    """
    Parse one feedback row into (guess, pattern).

    Raises:
      LengthMismatch      if the row does not have exactly N tokens
      FeedbackSyntaxError if any token is malformed
    """
    tokens = row.split()
    if len(tokens) != N:
        raise LengthMismatch(f"feedback row {row!r} has {len(tokens)} tokens, expected {N}")

    letters: List[str] = []
    marks: List[str] = []
    for tok in tokens:
        letter, mark = parse_token(tok)
        letters.append(letter)
        marks.append(mark)
    return "".join(letters), "".join(marks)


def format_row(guess: str, pattern: str) -> str:
    """Inverse of parse_row; the benchmark CSV stores games in this form."""
    out = []
    for letter, mark in zip(guess, pattern):
        prefix = {GRAY: "-", YELLOW: "~"}.get(mark, "")
        out.append(prefix + letter)
    return " ".join(out)
