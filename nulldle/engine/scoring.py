"""
Per-letter feedback for a single (target, guess) pair.

Conventions:
  - CORRECT (G) : right letter, right position
  - PRESENT (Y) : letter is in the target, but elsewhere
  - ABSENT  (-) : letter not in the target (or guessed more times than it occurs)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all CORRECT positions and counts the target letters
     that were NOT matched by position.
  2) Second pass walks the remaining positions left to right and marks
     PRESENT only while that letter still has unclaimed credit.

Position matches always claim credit first, so a duplicate letter in the
guess can never be credited more often than it occurs in the target.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidLength


class LetterScore(str, Enum):
    """Feedback for one position; value is its pattern symbol."""
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def priority(self) -> int:
        # Display priority used by the keyboard: CORRECT > PRESENT > ABSENT
        return _PRIORITY[self]


_PRIORITY = {LetterScore.ABSENT: 0, LetterScore.PRESENT: 1, LetterScore.CORRECT: 2}

# One LetterScore per position, produced fresh for every guess.
Feedback = Tuple[LetterScore, ...]


def evaluate(target: str, guess: str) -> Feedback:
    """
    Score `guess` against `target`.

    Raises:
      InvalidLength if the (normalized) words differ in length.

    Examples:
      to_pattern(evaluate("level", "belle")) -> "-GYYY"
      to_pattern(evaluate("alert", "belly")) -> "-YY--"
    """
    # Case-insensitive; canonicalize both sides to lowercase
    target = target.strip().lower()
    guess = guess.strip().lower()
    if len(target) != len(guess):
        raise InvalidLength(len(target), len(guess))

    result = [LetterScore.ABSENT] * len(guess)

    # Pass 1: greens, plus the unmatched target letters still up for grabs
    remaining: Counter = Counter()
    for i, (t, g) in enumerate(zip(target, guess)):
        if g == t:
            result[i] = LetterScore.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: yellows, capped by remaining multiplicity
    for i, g in enumerate(guess):
        if result[i] is LetterScore.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterScore.PRESENT
            remaining[g] -= 1

    return tuple(result)


def to_pattern(feedback: Iterable[LetterScore]) -> str:
    """Render feedback as a compact string, e.g. "GY--G"."""
    return "".join(s.value for s in feedback)


def from_pattern(pattern: str) -> Feedback:
    return tuple(LetterScore(ch) for ch in pattern)


def is_solved(feedback: Iterable[LetterScore]) -> bool:
    fb = tuple(feedback)
    return bool(fb) and all(s is LetterScore.CORRECT for s in fb)
