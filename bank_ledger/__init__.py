"""
Bank Ledger

An in-memory ledger of savings and current accounts with a console demo.
Supports deposits, withdrawals, overdrafts, interest and transfers.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .exceptions import (
    LedgerError,
    InvalidAccountError,
    InvalidAmountError,
    InvalidRateError,
    InvalidOverdraftLimitError,
    ConfigurationError,
)
from .models import Account, AccountType, SavingsAccount, CurrentAccount, as_savings
from .bank import Bank
from .config import LedgerConfig
from .cli import main


def create_bank(name: str = "Bank") -> Bank:
    """
    Create an empty Bank ledger.

    Args:
        name: Display name of the bank

    Returns:
        Bank instance
    """
    return Bank(name)


__all__ = [
    "Account",
    "AccountType",
    "SavingsAccount",
    "CurrentAccount",
    "as_savings",
    "Bank",
    "LedgerConfig",
    "LedgerError",
    "InvalidAccountError",
    "InvalidAmountError",
    "InvalidRateError",
    "InvalidOverdraftLimitError",
    "ConfigurationError",
    "create_bank",
    "main"
]
