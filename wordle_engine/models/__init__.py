"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Attempt, GameSnapshot, Language, Letter, LetterStatus,
    ValidationError, ValidationErrorKind
)
from .state import (
    EditInput, Errored, GameEvent, GameState, Idle, Lost, Ongoing,
    StartNewGame, SubmitAttempt, SwitchLanguage, Won, status_name
)

__all__ = [
    'Attempt', 'GameSnapshot', 'Language', 'Letter', 'LetterStatus',
    'ValidationError', 'ValidationErrorKind',
    'EditInput', 'Errored', 'GameEvent', 'GameState', 'Idle', 'Lost', 'Ongoing',
    'StartNewGame', 'SubmitAttempt', 'SwitchLanguage', 'Won', 'status_name'
]
