"""Tests for configuration and logging setup."""

import logging

import pytest

from bank_ledger.config import ENV_LOG_FORMAT, ENV_LOG_LEVEL, LedgerConfig
from bank_ledger.exceptions import ConfigurationError, LedgerError
from bank_ledger.logging_config import (
    PACKAGE_LOGGER,
    ClickEchoHandler,
    get_logger,
    setup_logging,
)


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self):
        config = LedgerConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "console"

    def test_log_level_normalized(self):
        assert LedgerConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            LedgerConfig(log_level="LOUD")

    def test_unknown_log_format(self):
        with pytest.raises(ConfigurationError, match="Unknown log format"):
            LedgerConfig(log_format="xml")

    def test_configuration_error_is_ledger_error(self):
        assert issubclass(ConfigurationError, LedgerError)
        assert issubclass(LedgerError, ValueError)

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        monkeypatch.delenv(ENV_LOG_FORMAT, raising=False)

        assert LedgerConfig.from_env() == LedgerConfig()

    def test_from_env_values(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "warning")
        monkeypatch.setenv(ENV_LOG_FORMAT, "detailed")

        config = LedgerConfig.from_env()

        assert config.log_level == "WARNING"
        assert config.log_format == "detailed"

    def test_with_overrides(self):
        config = LedgerConfig().with_overrides(log_level="ERROR")

        assert config.log_level == "ERROR"
        assert config.log_format == "console"

    def test_with_overrides_ignores_none(self):
        config = LedgerConfig(log_level="DEBUG")
        assert config.with_overrides(None, None) == config

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            LedgerConfig().log_level = "DEBUG"


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_installs_click_handler(self):
        logger = setup_logging("DEBUG")

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], ClickEchoHandler)

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("LOUD").level == logging.INFO

    def test_console_format_is_bare_message(self, capsys):
        setup_logging("INFO", "console")

        get_logger("bank_ledger.test").info("hello")

        assert capsys.readouterr().out == "hello\n"

    def test_warnings_go_to_stderr(self, capsys):
        setup_logging("INFO", "console")

        get_logger("bank_ledger.test").warning("careful")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "careful\n"

    def test_detailed_format(self, capsys):
        setup_logging("INFO", "detailed")

        get_logger("bank_ledger.test").info("hello")

        out = capsys.readouterr().out
        assert "| INFO     | bank_ledger.test | hello" in out

    def test_get_logger(self):
        assert get_logger("bank_ledger.models") is logging.getLogger("bank_ledger.models")
