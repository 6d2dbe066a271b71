"""
Exceptions for the bank ledger.

Only invalid input is raised. Expected business outcomes such as
insufficient funds or a duplicate account number are returned as ``False``
and reported through logging instead.
"""


class LedgerError(ValueError):
    """Base class for invalid-argument errors raised by the ledger."""


class InvalidAccountError(LedgerError):
    """Raised for a missing account or bad account identity/opening balance."""


class InvalidAmountError(LedgerError):
    """Raised when an amount is not a positive number."""


class InvalidRateError(LedgerError):
    """Raised when an interest rate is negative."""


class InvalidOverdraftLimitError(LedgerError):
    """Raised when an overdraft limit is negative."""


class ConfigurationError(LedgerError):
    """Raised when configuration values are invalid."""
