"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import MAX_ATTEMPTS

# Load environment variables from config.env (next to this module)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Game Settings
    DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'en').lower()
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', MAX_ATTEMPTS))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'False').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_TO_FILE = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_TO_FILE = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """
    Select a configuration class.

    Args:
        name: 'development', 'production' or 'testing'; defaults to the
            WORDLE_ENV environment variable, then 'default'

    Raises:
        ValueError: If the name is not a known configuration
    """
    name = (name or os.getenv('WORDLE_ENV', 'default')).lower()
    if name not in config:
        raise ValueError(f"Unknown configuration '{name}'. Expected one of: {', '.join(config)}")
    return config[name]
