"""
Game Logger Module for the Wordle engine

This module provides structured logging for player actions, game events
and errors. Every entry is a JSON document so logs are easy to parse.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for Wordle game sessions.

    Features:
    - Player action tracking per session
    - Game event logging (new game, win, loss, language switch)
    - Validation and error logging
    - JSON structured logs for easy parsing
    """

    def __init__(self,
                 log_dir: str = "logs",
                 level: str = "INFO",
                 log_to_file: bool = False):
        self.log_dir = Path(log_dir)
        self.log_to_file = log_to_file

        # Setup main game logger
        self.logger = self._setup_logger(level)

    def configure(self, config_class) -> None:
        """Re-apply handlers and level from a configuration class (DEBUG forces DEBUG level)."""
        self.log_dir = Path(config_class.LOG_DIR)
        self.log_to_file = config_class.LOG_TO_FILE
        for handler in self.logger.handlers:
            handler.close()
        self._setup_logger('DEBUG' if config_class.DEBUG else config_class.LOG_LEVEL)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the main game logger with console and optional file handlers."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(getattr(logging, level, logging.INFO))

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          session_id: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'session_id': session_id,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_player_action(self,
                          session_id: str,
                          action: str,
                          **kwargs):
        """
        Log player actions with full context.

        Args:
            session_id: Session the action was applied to
            action: Type of action (e.g., 'edit_input', 'submit_attempt')
            **kwargs: Additional details to log
        """
        log_message = self._create_log_entry('PLAYER_ACTION', action, session_id, kwargs)
        self.logger.debug(log_message)

    def log_game_event(self,
                       session_id: str,
                       event: str,
                       **kwargs):
        """
        Log game-specific events (new game, wins, losses, etc.).

        Args:
            session_id: Session identifier
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        log_message = self._create_log_entry('GAME_EVENT', event, session_id, kwargs)
        self.logger.info(log_message)

    def log_validation_error(self,
                             session_id: str,
                             kind: str,
                             message: str,
                             **kwargs):
        """Log a rejected guess. These are expected and recoverable."""
        details = {'kind': kind, 'message': message, **kwargs}
        log_message = self._create_log_entry('VALIDATION_ERROR', 'submit_attempt', session_id, details)
        self.logger.info(log_message)

    def log_error(self,
                  action: str,
                  message: str,
                  session_id: Optional[str] = None,
                  error: Optional[Exception] = None):
        """
        Log errors with full context.

        Args:
            action: Action that was being performed
            message: Human readable description
            session_id: Session identifier if applicable
            error: Exception that occurred, if any
        """
        details: Dict[str, Any] = {'message': message}
        if error is not None:
            details['error_type'] = type(error).__name__
            details['error_message'] = str(error)

        log_message = self._create_log_entry('ERROR', action, session_id, details)
        self.logger.error(log_message)


# Global logger instance
game_logger = GameLogger(
    log_dir=Config.LOG_DIR,
    level=Config.LOG_LEVEL,
    log_to_file=Config.LOG_TO_FILE
)
