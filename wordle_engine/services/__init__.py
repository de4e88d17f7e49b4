"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import WordDictionary, load_dictionary
from .scorer import classify, score, validate_guess
from .state_machine import GameStateMachine
from .game_service import GameService, get_game_service, initialize_game_service, letter_summary

__all__ = [
    'WordDictionary', 'load_dictionary',
    'classify', 'score', 'validate_guess',
    'GameStateMachine',
    'GameService', 'get_game_service', 'initialize_game_service', 'letter_summary'
]
