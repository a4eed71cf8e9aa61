"""
Word source: the dictionary guesses are checked against, and the pool the
hidden target is drawn from.

  - `allowed` : every word accepted as a guess
  - `answers` : words that may be chosen as the target (defaults to allowed)

Both lists are normalized (stripped, lowercase) and filtered to clean
N-letter a-z tokens; anything else is dropped silently, the validator is
the tool for reporting bad lines.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

from nulldle.config import BUNDLED_WORDS_PATH, WORD_LENGTH
from nulldle.engine.validation import is_well_formed, normalize
from .io import read_words


def _clean(words: Iterable[str], N: int) -> List[str]:
    # Stable dedupe; keep first occurrence
    seen = set()
    out: List[str] = []
    for w in words:
        if not is_well_formed(w, N):
            continue
        w = normalize(w)
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


class WordSource:
    def __init__(self, allowed: Iterable[str], answers: Optional[Iterable[str]] = None, *,
                 N: int = WORD_LENGTH, seed: int | None = None,
                 forced_target: Optional[str] = None):
        self.N = int(N)
        self.allowed: List[str] = _clean(allowed, self.N)
        if not self.allowed:
            raise ValueError(f"word source has no valid {self.N}-letter words")

        self.answers: List[str] = _clean(answers, self.N) if answers is not None else list(self.allowed)
        if not self.answers:
            raise ValueError(f"answer pool has no valid {self.N}-letter words")

        self._allowed_set: FrozenSet[str] = frozenset(self.allowed)
        self.rng = random.Random(seed)

        # Deterministic target for tests and `--target`
        self.forced_target: Optional[str] = None
        if forced_target is not None:
            if not is_well_formed(forced_target, self.N):
                raise ValueError(f"forced target must be {self.N} letters a-z: {forced_target!r}")
            self.forced_target = normalize(forced_target)

    @classmethod
    def from_files(cls, allowed_path: Path | str, answers_path: Path | str | None = None,
                   **kwargs) -> "WordSource":
        allowed = read_words(allowed_path)
        answers = read_words(answers_path) if answers_path else None
        return cls(allowed, answers, **kwargs)

    @classmethod
    def default(cls, **kwargs) -> "WordSource":
        """The bundled five-letter dictionary."""
        return cls.from_files(BUNDLED_WORDS_PATH, **kwargs)

    def pick_target(self) -> str:
        """Forced target if set, else a uniform pick from the answer pool."""
        if self.forced_target is not None:
            return self.forced_target
        return self.rng.choice(self.answers)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and normalize(word) in self._allowed_set

    def __len__(self) -> int:
        return len(self.allowed)

    def __iter__(self):
        return iter(self.allowed)
