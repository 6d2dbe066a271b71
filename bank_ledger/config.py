"""Configuration for the bank ledger."""

import os
from dataclasses import dataclass, replace
from typing import Optional

from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "detailed")

ENV_LOG_LEVEL = "BANK_LEDGER_LOG_LEVEL"
ENV_LOG_FORMAT = "BANK_LEDGER_LOG_FORMAT"


@dataclass(frozen=True)
class LedgerConfig:
    """Runtime settings for the ledger console."""

    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self):
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Build a config from BANK_LEDGER_* environment variables."""
        defaults = cls()
        return cls(
            log_level=os.environ.get(ENV_LOG_LEVEL, defaults.log_level),
            log_format=os.environ.get(ENV_LOG_FORMAT, defaults.log_format),
        )

    def with_overrides(self, log_level: Optional[str] = None,
                       log_format: Optional[str] = None) -> "LedgerConfig":
        """Return a copy with the given non-None values applied."""
        changes = {}
        if log_level is not None:
            changes["log_level"] = log_level
        if log_format is not None:
            changes["log_format"] = log_format
        return replace(self, **changes)
