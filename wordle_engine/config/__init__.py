"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    MAX_ATTEMPTS, WORD_LENGTH, WORDS_DIR, word_list_path,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'MAX_ATTEMPTS', 'WORD_LENGTH', 'WORDS_DIR', 'word_list_path',
    'validate_word_list_integrity', 'get_word_statistics'
]
