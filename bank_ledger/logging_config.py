"""
Logging configuration for the bank ledger.

Account and ledger reports are plain log records. This module routes them to
the terminal through click so they read like console output.
"""

import logging

import click

PACKAGE_LOGGER = "bank_ledger"

DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ClickEchoHandler(logging.Handler):
    """Write log records with click.echo; warnings and errors go to stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            click.echo(message, err=record.levelno >= logging.WARNING)
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "INFO", format_type: str = "console") -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "console" for bare messages or "detailed" for
            timestamped records

    Returns:
        The configured package logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "detailed":
        formatter = logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)
    else:
        formatter = logging.Formatter("%(message)s")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    # Replace handlers from an earlier call
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = ClickEchoHandler()
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)
