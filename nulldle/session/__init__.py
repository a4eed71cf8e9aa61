from .core import Session, GameStatus, GuessResult

__all__ = ["Session", "GameStatus", "GuessResult"]
