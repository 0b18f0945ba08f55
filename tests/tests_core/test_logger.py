"""
==============================================
Pytest suite for core/logger.py
==============================================

How to Execute:
---------------
All tests:          pytest tests/tests_core/test_logger.py -v
"""

import logging
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from core.logger import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
def test_get_logger_level_override():
    logger = get_logger("sqlbuilder.tests.level", level="debug")

    assert logger.name == "sqlbuilder.tests.level"
    assert logger.level == logging.DEBUG


@pytest.mark.unit
def test_setup_logging_console(restore_root_logger):
    setup_logging(log_level="INFO")

    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)


@pytest.mark.unit
def test_setup_logging_file(restore_root_logger, tmp_path):
    setup_logging(log_level="DEBUG", log_file="builder.log", log_dir=str(tmp_path / "logs"),
                  console_output=False)

    logging.getLogger("sqlbuilder.tests").debug("hello")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert "hello" in (tmp_path / "logs" / "builder.log").read_text(encoding="utf-8")


@pytest.mark.integration
def test_setup_logging_uses_config_defaults(restore_root_logger, tmp_path):
    fake_config = SimpleNamespace(log_level="ERROR", log_file="cfg.log", log_dir=tmp_path)

    with patch("core.logger.config", fake_config):
        setup_logging(console_output=False)

    assert restore_root_logger.level == logging.ERROR
    assert (tmp_path / "cfg.log").exists()
