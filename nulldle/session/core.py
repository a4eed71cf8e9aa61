"""
Game session state machine.

    LOADING --reset(target)--> IN_PROGRESS --guess == target--> WON
                                    |
                                    +--6th guess, not target--> LOST

- submit_guess: validate, score, fold into the keyboard, decide outcome.
- reset:        start over with a new target (the only way out of WON/LOST).

The session never talks to statistics itself. Each GuessResult says whether
that call finished the game (`finished`), and that flag is True exactly once
per game; the caller uses it to record a win or a loss.

UI-agnostic so it can be driven by the terminal app, the autoplay harness
or tests without changes.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Container, Dict, Iterable, List, Optional, Tuple

from nulldle.config import MAX_ATTEMPTS
from nulldle.datasets import WordSource
from nulldle.engine import (
    DuplicateGuess, Feedback, InvalidLength, KeyboardState, LetterScore,
    NotAcceptingInput, UnknownWord, evaluate, normalize, to_pattern,
)
from nulldle.utils import game_logger


class GameStatus(str, Enum):
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one accepted guess."""
    guess: str
    feedback: Feedback
    status: GameStatus
    finished: bool        # True only on the guess that ended the game
    attempt: int          # 1-based index of this guess

    @property
    def pattern(self) -> str:
        return to_pattern(self.feedback)

    # ---- statistics payloads ----

    def win_args(self) -> Dict[str, int]:
        """Keyword arguments for StatsStore.record_win after a win."""
        return {
            "guesses_used": self.attempt,
            "incorrect_attempts": min(max(self.attempt - 1, 0), MAX_ATTEMPTS),
        }

    def loss_args(self) -> Dict[str, int]:
        return {"incorrect_attempts": MAX_ATTEMPTS}


class Session:
    """
    One game at a time over a fixed word source.

    Args:
        words:  legal guesses; a WordSource is used as is, any other
                iterable is normalized into a lowercase frozenset
        target: hidden word; without one the session stays LOADING until
                reset() is called
    """

    max_attempts = MAX_ATTEMPTS

    def __init__(self, words: Iterable[str], target: Optional[str] = None):
        if isinstance(words, WordSource):
            self.words: Container[str] = words
        else:
            self.words = frozenset(normalize(w) for w in words)
        self._lock = threading.Lock()
        self._target: Optional[str] = None
        self._guesses: List[str] = []
        self._feedback: List[Feedback] = []
        self._keyboard = KeyboardState()
        self._status = GameStatus.LOADING
        if target is not None:
            self.reset(target)

    # ---- lifecycle ----

    def reset(self, new_target: str) -> None:
        """Clear history and keyboard and start a new game on `new_target`."""
        target = normalize(new_target)
        if not target or not target.isalpha():
            raise ValueError(f"target must be a non-empty alphabetic word: {new_target!r}")
        with self._lock:
            self._target = target
            self._guesses = []
            self._feedback = []
            self._keyboard = KeyboardState()
            self._status = GameStatus.IN_PROGRESS
        game_logger.log_game_event("game_started", word_length=len(target))

    # ---- the one mutating operation ----

    def submit_guess(self, candidate: str) -> GuessResult:
        """
        Play `candidate`.

        Raises (nothing is recorded and no attempt is used):
            NotAcceptingInput  session LOADING, WON or LOST
            InvalidLength      wrong number of letters
            UnknownWord        not in the word source
            DuplicateGuess     already played this game
        """
        with self._lock:
            if self._status is not GameStatus.IN_PROGRESS:
                game_logger.log_rejection("not_accepting_input", status=self._status.value)
                raise NotAcceptingInput(self._status)

            guess = normalize(candidate)
            if len(guess) != len(self._target):
                game_logger.log_rejection("invalid_length", guess=guess)
                raise InvalidLength(len(self._target), len(guess))
            if guess not in self.words:
                game_logger.log_rejection("unknown_word", guess=guess)
                raise UnknownWord(guess)
            if guess in self._guesses:
                game_logger.log_rejection("duplicate_guess", guess=guess)
                raise DuplicateGuess(guess)

            feedback = evaluate(self._target, guess)
            self._guesses.append(guess)
            self._feedback.append(feedback)
            self._keyboard.apply_guess(guess, feedback)

            # Outcome: a win on the last attempt is still a win
            if guess == self._target:
                self._status = GameStatus.WON
            elif len(self._guesses) >= self.max_attempts:
                self._status = GameStatus.LOST

            result = GuessResult(
                guess=guess,
                feedback=feedback,
                status=self._status,
                finished=self._status.is_terminal,
                attempt=len(self._guesses),
            )
            target = self._target

        game_logger.log_game_event("guess_accepted", attempt=result.attempt, pattern=result.pattern)
        if result.finished:
            game_logger.log_game_event(
                "game_won" if result.status is GameStatus.WON else "game_lost",
                guesses=result.attempt, target=target,
            )
        return result

    # ---- read-only views ----

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def attempts_left(self) -> int:
        if self._status is GameStatus.LOADING:
            return self.max_attempts
        return self.max_attempts - len(self._guesses)

    @property
    def word_length(self) -> Optional[int]:
        return len(self._target) if self._target else None

    @property
    def revealed_target(self) -> Optional[str]:
        """The target, but only once the game is over."""
        return self._target if self._status.is_terminal else None

    def history(self) -> List[Tuple[str, Feedback]]:
        with self._lock:
            return list(zip(self._guesses, self._feedback))

    def keyboard_state(self) -> Dict[str, Optional[LetterScore]]:
        with self._lock:
            return self._keyboard.as_dict()

    def keyboard(self) -> KeyboardState:
        """A rebuilt copy of the keyboard, safe to hand to a renderer."""
        return KeyboardState.rebuild(self.history())
