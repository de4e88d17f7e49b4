"""
Wordle Engine Package

Scoring and game-state logic for a single-player Wordle-style puzzle:
guess validation, duplicate-aware letter classification and the state
machine that sequences attempts to a win or a loss.
"""

from .exceptions import GameError, IllegalTransitionError, SessionNotFoundError
from .models import Attempt, Language, Letter, LetterStatus, ValidationError, ValidationErrorKind
from .services import GameService, GameStateMachine, WordDictionary, load_dictionary, score
from .utils.helpers import normalize_word

__version__ = "1.0.0"

__all__ = [
    'GameError', 'IllegalTransitionError', 'SessionNotFoundError',
    'Attempt', 'Language', 'Letter', 'LetterStatus', 'ValidationError', 'ValidationErrorKind',
    'GameService', 'GameStateMachine', 'WordDictionary', 'load_dictionary', 'score',
    'normalize_word'
]
