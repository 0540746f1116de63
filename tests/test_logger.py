"""
Tests for the logging setup — level setting, file handler and stderr fallback.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from gendesk.core import logger as logger_module
from gendesk.core.logger import get_logger, log_level, setup_logging


@pytest.fixture
def clean_logger(tmp_path: Path, monkeypatch):
    """Send the log file into tmp_path and remove handlers added by the test."""
    monkeypatch.setattr(logger_module, "LOG_FILE", tmp_path / "cache" / "gendesk.log")
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    log = logging.getLogger("gendesk")
    saved_handlers, saved_level = log.handlers[:], log.level
    log.handlers.clear()
    yield log
    for handler in log.handlers:
        handler.close()
    log.handlers[:] = saved_handlers
    log.setLevel(saved_level)


class TestLogLevel:
    def test_names(self):
        assert log_level("info") == logging.INFO
        assert log_level("WARNING") == logging.WARNING

    def test_numbers(self):
        assert log_level(30) == logging.WARNING

    def test_unknown_is_debug(self):
        assert log_level("chatty") == logging.DEBUG
        assert log_level(None) == logging.DEBUG


class TestSetupLogging:
    def test_file_handler(self, clean_logger, tmp_path: Path):
        log = setup_logging()
        assert log is clean_logger
        assert log.level == logging.DEBUG
        [handler] = log.handlers
        assert isinstance(handler, RotatingFileHandler)
        assert (tmp_path / "cache").is_dir()
        assert sys.excepthook is logger_module._excepthook

    def test_level_from_settings(self, clean_logger, isolated_config: Path):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('{"log_level": "warning"}')
        log = setup_logging()
        assert log.level == logging.WARNING
        assert log.handlers[0].level == logging.WARNING

    def test_no_duplicate_handlers(self, clean_logger):
        setup_logging()
        setup_logging()
        assert len(clean_logger.handlers) == 1

    def test_stderr_fallback(self, clean_logger, tmp_path: Path, monkeypatch):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        monkeypatch.setattr(logger_module, "LOG_FILE", blocker / "gendesk.log")
        [handler] = setup_logging().handlers
        assert type(handler) is logging.StreamHandler
        assert handler.level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("app").name == "gendesk.app"
