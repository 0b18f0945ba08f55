"""
==============================================
Pytest suite for core/config.py
==============================================

How to Execute:
---------------
All tests:          pytest tests/tests_core/test_config.py -v
"""

from pathlib import Path

import pytest

from core.config import Config

ENV_VARS = ("SQLBUILDER_FLAVOR", "SQLBUILDER_LOG_LEVEL", "SQLBUILDER_LOG_FILE", "SQLBUILDER_LOG_DIR")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all sqlbuilder settings from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
def test_defaults(clean_env):
    config = Config()

    assert config.default_flavor == "mysql"
    assert config.log_level == "WARNING"
    assert config.log_file is None
    assert config.log_dir == Path("logs")


@pytest.mark.unit
def test_environment_overrides(clean_env):
    clean_env.setenv("SQLBUILDER_FLAVOR", "postgresql")
    clean_env.setenv("SQLBUILDER_LOG_LEVEL", "DEBUG")
    clean_env.setenv("SQLBUILDER_LOG_FILE", "builder.log")
    clean_env.setenv("SQLBUILDER_LOG_DIR", "/tmp/sqlbuilder")

    config = Config()

    assert config.default_flavor == "postgresql"
    assert config.builder.default_flavor == "postgresql"
    assert config.log_level == "DEBUG"
    assert config.log_file == "builder.log"
    assert config.log_dir == Path("/tmp/sqlbuilder")


@pytest.mark.edge_case
def test_empty_log_file_means_none(clean_env):
    clean_env.setenv("SQLBUILDER_LOG_FILE", "")

    assert Config().log_file is None


@pytest.mark.edge_case
def test_unknown_flavor_is_stored_unvalidated(clean_env):
    """Flavor names are only resolved when a builder needs one."""
    clean_env.setenv("SQLBUILDER_FLAVOR", "nosuchdb")

    assert Config().default_flavor == "nosuchdb"
