import json
import os
import logging

import pytest

from wordle_engine.config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
)
from wordle_engine.config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from wordle_engine.utils.game_logger import GameLogger


def test_game_constants():
    assert MAX_ATTEMPTS == 6
    assert WORD_LENGTH == 5


def test_config_mapping():
    assert config['default'] is DevelopmentConfig
    assert config['testing'] is TestingConfig
    assert TestingConfig.TESTING
    assert not TestingConfig.LOG_TO_FILE
    assert issubclass(TestingConfig, Config)


def test_config_defaults_are_usable():
    assert Config.MAX_ATTEMPTS >= 1
    assert Config.DEFAULT_LANGUAGE in ("en", "fr")
    assert hasattr(logging, Config.LOG_LEVEL)


def test_file_logging_writes_json_entries(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path / "logs"), log_to_file=True)
    try:
        logger.log_game_event("abc", "game_won", rounds=3)
        logger.log_error("submit_attempt", "dictionary missing", "abc", error=OSError("gone"))
        for handler in logger.logger.handlers:
            handler.flush()

        log_files = list((tmp_path / "logs").glob("game_log_*.log"))
        assert len(log_files) == 1
        lines = log_files[0].read_text(encoding="utf-8").splitlines()
        entries = [json.loads(line.split(" | ", 2)[2]) for line in lines]

        assert entries[0]["event_type"] == "GAME_EVENT"
        assert entries[0]["details"] == {"rounds": 3}
        assert entries[1]["event_type"] == "ERROR"
        assert entries[1]["details"]["error_type"] == "OSError"
    finally:
        for handler in logger.logger.handlers:
            handler.close()
        # restore the shared console-only setup
        GameLogger()


def test_get_config_by_name_and_environment(monkeypatch):
    assert get_config('production') is ProductionConfig
    monkeypatch.setenv('WORDLE_ENV', 'testing')
    assert get_config() is TestingConfig
    monkeypatch.delenv('WORDLE_ENV')
    assert get_config() is DevelopmentConfig
    with pytest.raises(ValueError):
        get_config('staging')


def test_max_attempts_defaults_to_game_constant():
    if 'MAX_ATTEMPTS' not in os.environ:
        assert Config.MAX_ATTEMPTS == MAX_ATTEMPTS
