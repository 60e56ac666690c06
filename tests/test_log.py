"""Tests for logging setup and CALB_LOG_* overrides."""

import logging

import pytest

from calb.utils import log as calb_log


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let setup_logging run again and drop the handlers it adds."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    monkeypatch.setattr(calb_log, "_LOGGER_CONFIGURED", False)
    monkeypatch.delenv(calb_log.ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(calb_log.ENV_LOG_DIR, raising=False)
    yield root
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


class TestResolveLogLevel:
    """Test CALB_LOG_LEVEL parsing."""

    def test_default(self, monkeypatch):
        """Unset: INFO."""
        monkeypatch.delenv(calb_log.ENV_LOG_LEVEL, raising=False)
        assert calb_log.resolve_log_level() == logging.INFO

    @pytest.mark.parametrize("raw,expected", [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("10", 10)])
    def test_names_and_numbers(self, monkeypatch, raw, expected):
        """Level names are case-insensitive; digits are taken as-is."""
        monkeypatch.setenv(calb_log.ENV_LOG_LEVEL, raw)
        assert calb_log.resolve_log_level() == expected

    def test_unknown_name_falls_back(self, monkeypatch):
        """Garbage uses the default."""
        monkeypatch.setenv(calb_log.ENV_LOG_LEVEL, "chatty")
        assert calb_log.resolve_log_level(logging.ERROR) == logging.ERROR


class TestSetupLogging:
    """Test handler setup."""

    def test_env_level_and_dir(self, fresh_logging, tmp_path, monkeypatch):
        """CALB_LOG_LEVEL and CALB_LOG_DIR drive the root level and the log file."""
        monkeypatch.setenv(calb_log.ENV_LOG_LEVEL, "debug")
        monkeypatch.setenv(calb_log.ENV_LOG_DIR, str(tmp_path / "out"))
        calb_log.setup_logging()
        assert fresh_logging.level == logging.DEBUG
        assert (tmp_path / "out" / calb_log.LOG_FILENAME).is_file()

    def test_configured_once(self, fresh_logging, tmp_path):
        """A second call adds no handlers."""
        calb_log.setup_logging(tmp_path, level=logging.WARNING)
        count = len(fresh_logging.handlers)
        calb_log.setup_logging(tmp_path, level=logging.DEBUG)
        assert len(fresh_logging.handlers) == count
        assert fresh_logging.level == logging.WARNING
