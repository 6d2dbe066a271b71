"""Shared fixtures for the bank ledger tests."""

import logging
from decimal import Decimal

import pytest

from bank_ledger.bank import Bank
from bank_ledger.logging_config import PACKAGE_LOGGER
from bank_ledger.models import CurrentAccount, SavingsAccount


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers and levels left behind by CLI runs."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def savings():
    """Savings account SAV1 with 1500.00 at 3%."""
    return SavingsAccount("SAV1", "Alice Johnson", Decimal('1500.00'), Decimal('0.03'))


@pytest.fixture
def current():
    """Current account CUR1 with 500.00 and a 300.00 overdraft."""
    return CurrentAccount("CUR1", "Bob Smith", Decimal('500.00'), Decimal('300.00'))


@pytest.fixture
def bank(savings, current):
    """Bank holding SAV1 and CUR1."""
    bank = Bank()
    bank.add_account(savings)
    bank.add_account(current)
    return bank
