"""
Gameplay error types.

Every rejection the engine can produce is an exception with a short
user-facing `message`, so a front end can show it without knowing the
rules that produced it.

  - InvalidLength     : guess/target length mismatch (collaborator error)
  - UnknownWord       : guess not in the word source (attempt not consumed)
  - DuplicateGuess    : guess already played this game (attempt not consumed)
  - NotAcceptingInput : session is loading or already finished
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for all nulldle errors."""
    message = "Something went wrong"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)


class InvalidLength(GameError, ValueError):
    message = "Words must have the same length"

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} letters, got {actual}")


class UnknownWord(GameError):
    message = "Not a valid word!"

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"{word!r} is not in the word list")


class DuplicateGuess(GameError):
    message = "You already tried that word!"

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"{word!r} was already guessed")


class NotAcceptingInput(GameError):
    message = "The game is not accepting guesses"

    def __init__(self, status):
        self.status = status
        super().__init__(f"session is {getattr(status, 'value', status)}")
