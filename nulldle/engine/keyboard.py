"""
On-screen keyboard state.

Folds every scored guess into one LetterScore per letter, keeping the best
evidence ever seen:

  - CORRECT is never replaced
  - PRESENT is only replaced by CORRECT
  - ABSENT is replaced by anything better

Because the rule is "keep the max priority", the final state does not depend
on the order guesses were applied. The state is derived: it can always be
rebuilt from the guess history.
"""

from __future__ import annotations

from string import ascii_lowercase
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .scoring import Feedback, LetterScore

# Keyboard layout rows, top to bottom
QWERTY_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


class KeyboardState:
    def __init__(self):
        # None == unseen
        self._scores: Dict[str, Optional[LetterScore]] = {c: None for c in ascii_lowercase}

    @classmethod
    def rebuild(cls, history: Iterable[Tuple[str, Feedback]]) -> "KeyboardState":
        """Replay a (guess, feedback) history into a fresh state."""
        state = cls()
        for guess, feedback in history:
            state.apply_guess(guess, feedback)
        return state

    def apply_guess(self, guess: str, feedback: Feedback) -> "KeyboardState":
        """
        Upgrade letters of `guess` with the scores in `feedback`.

        Expects an already validated pair (same length, a-z only).
        Returns self so calls can be chained.
        """
        for letter, score in zip(guess.lower(), feedback):
            current = self._scores.get(letter)
            if current is None or score.priority > current.priority:
                self._scores[letter] = score
        return self

    def get(self, letter: str) -> Optional[LetterScore]:
        return self._scores.get(letter.lower())

    def as_dict(self) -> Dict[str, Optional[LetterScore]]:
        return dict(self._scores)

    def rows(self) -> List[List[Tuple[str, Optional[LetterScore]]]]:
        """Letters grouped the way a QWERTY keyboard shows them."""
        return [[(c, self._scores[c]) for c in row] for row in QWERTY_ROWS]

    def __iter__(self) -> Iterator[Tuple[str, Optional[LetterScore]]]:
        return iter(self._scores.items())

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeyboardState):
            return NotImplemented
        return self._scores == other._scores

    def __repr__(self) -> str:
        seen = {c: s.value for c, s in self._scores.items() if s is not None}
        return f"KeyboardState({seen})"
