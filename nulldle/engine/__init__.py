from .scoring import LetterScore, Feedback, evaluate, to_pattern, from_pattern, is_solved
from .keyboard import KeyboardState
from .constraints import filter_candidates
from .validation import normalize, is_well_formed
from .errors import GameError, InvalidLength, UnknownWord, DuplicateGuess, NotAcceptingInput

__all__ = [
    "LetterScore", "Feedback", "evaluate", "to_pattern", "from_pattern", "is_solved",
    "KeyboardState", "filter_candidates", "normalize", "is_well_formed",
    "GameError", "InvalidLength", "UnknownWord", "DuplicateGuess", "NotAcceptingInput",
]
