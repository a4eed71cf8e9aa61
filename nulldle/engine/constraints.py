"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the dictionary)
  - a history of (guess, feedback) pairs
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far.

The autoplay player uses this to keep its guesses consistent with the past.
"""

from typing import Iterable, List, Tuple

from .scoring import Feedback, evaluate

History = Iterable[Tuple[str, Feedback]]  # (guess, feedback)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) that would produce exactly the recorded
    feedback for every (guess, feedback) in `history`.

    Order is preserved as in `words`.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        if len(w) != N or not w.isalpha():
            continue

        # If this candidate were the target, would it reproduce every
        # recorded feedback?
        if all(evaluate(w, g) == fb for g, fb in history):
            out.append(w)

    return out
