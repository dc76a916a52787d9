"""Tests for logging configuration."""

import logging

from gitlab_fork.utils.logging_config import get_logger, resolve_log_level, setup_logging


def test_resolve_log_level():
    assert resolve_log_level(None) == logging.INFO
    assert resolve_log_level(logging.DEBUG) == logging.DEBUG
    assert resolve_log_level("warning") == logging.WARNING
    assert resolve_log_level("not-a-level") == logging.INFO


def test_setup_logging_writes_to_file(tmp_path):
    """Test that logs go to the configured file."""
    log_file = tmp_path / "fork.log"
    root_logger = logging.getLogger()
    previous_level = root_logger.level

    try:
        setup_logging(log_level="INFO", log_file=str(log_file))
        get_logger("gitlab_fork.test").info("fork initiated")
        for handler in root_logger.handlers:
            handler.flush()

        assert "gitlab_fork.test - INFO - fork initiated" in log_file.read_text()
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        setup_logging(log_level=previous_level)


def test_setup_logging_replaces_its_own_handlers(tmp_path):
    """Test that repeated setup does not stack handlers."""
    root_logger = logging.getLogger()
    previous_level = root_logger.level

    try:
        setup_logging(log_file=str(tmp_path / "a.log"))
        setup_logging(log_file=str(tmp_path / "b.log"))

        own = [h for h in root_logger.handlers if getattr(h, "_gitlab_fork", False)]
        assert len(own) == 2
        assert any(isinstance(h, logging.FileHandler) and h.baseFilename.endswith("b.log") for h in own)
    finally:
        setup_logging(log_level=previous_level)
