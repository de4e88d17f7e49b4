"""
Utilities Package

Contains text helpers and the structured game logger.
"""

from .helpers import normalize_word, is_alphabetic
from .game_logger import GameLogger, game_logger

__all__ = ['normalize_word', 'is_alphabetic', 'GameLogger', 'game_logger']
