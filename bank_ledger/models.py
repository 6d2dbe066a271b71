"""
Account models for the bank ledger.

Savings and current accounts are a closed set of variants. They share one
capability surface (deposit, withdraw, check_balance, get_account_type) but
each keeps its own state and its own withdrawal rule. The ``account_type``
tag identifies the variant.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import ClassVar, Optional, Protocol, cast

from .exceptions import (
    InvalidAccountError,
    InvalidAmountError,
    InvalidOverdraftLimitError,
    InvalidRateError,
)

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')
IDENTITY_FIELDS = ('account_number', 'account_holder')


class AccountType(Enum):
    """Account variants."""
    SAVINGS = "Savings"
    CURRENT = "Current"


def to_decimal(value, error=InvalidAmountError) -> Decimal:
    """Convert int, float, str or Decimal input to Decimal."""
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise error(f"Invalid amount: {value}")

    if not value.is_finite():
        raise error(f"Invalid amount: {value}")
    return value


def format_amount(amount: Decimal) -> str:
    """Format an amount for display, rounding half-up to cents."""
    return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"


class Account(Protocol):
    """Capability interface shared by every account variant."""

    account_type: ClassVar[AccountType]
    account_number: str
    account_holder: str
    balance: Decimal

    def deposit(self, amount) -> Decimal:
        ...

    def withdraw(self, amount) -> bool:
        ...

    def check_balance(self) -> Decimal:
        ...

    def get_account_type(self) -> str:
        ...


def _validate_identity(account_number, account_holder):
    if not isinstance(account_number, str) or not account_number.strip():
        raise InvalidAccountError("Account number cannot be empty.")
    if not isinstance(account_holder, str) or not account_holder.strip():
        raise InvalidAccountError("Account holder cannot be empty.")


def _opening_balance(balance) -> Decimal:
    balance = to_decimal(balance, InvalidAccountError)
    if balance < 0:
        raise InvalidAccountError("Initial balance cannot be negative.")
    return balance


def _positive_amount(amount, operation: str) -> Decimal:
    amount = to_decimal(amount)
    if amount <= 0:
        raise InvalidAmountError(f"{operation} amount must be positive.")
    return amount


def _checked_assignment(account, name: str, value):
    # account_number and account_holder are write-once
    if name in IDENTITY_FIELDS and name in account.__dict__:
        raise AttributeError(f"{name} cannot be changed once the account is opened")
    if name == 'balance':
        return to_decimal(value, InvalidAccountError)
    return value


def _credit(account, amount) -> Decimal:
    """Apply a deposit to any account variant and return the new balance."""
    amount = _positive_amount(amount, "Deposit")
    account.balance += amount
    logger.info(
        f"Deposited {format_amount(amount)} to {account.account_number} "
        f"(New balance: {format_amount(account.balance)})"
    )
    return account.balance


def _report_balance(account) -> Decimal:
    logger.info(
        f"Account {account.account_number} (Holder: {account.account_holder}) "
        f"- Balance: {format_amount(account.balance)}"
    )
    return account.balance


def _describe(account) -> str:
    return (
        f"{account.get_account_type()} Account[{account.account_number}] "
        f"Holder: {account.account_holder} Balance: {format_amount(account.balance)}"
    )


@dataclass(eq=False)
class SavingsAccount:
    """Savings account that earns interest when it is explicitly applied."""

    account_type: ClassVar[AccountType] = AccountType.SAVINGS

    account_number: str
    account_holder: str
    balance: Decimal = Decimal('0.00')
    interest_rate: Decimal = Decimal('0.00')  # fraction, 0.03 == 3%

    def __post_init__(self):
        _validate_identity(self.account_number, self.account_holder)
        self.balance = _opening_balance(self.balance)
        self.set_interest_rate(self.interest_rate)

    def __setattr__(self, name, value):
        value = _checked_assignment(self, name, value)
        if name == 'balance' and name in self.__dict__ and value < 0:
            raise InvalidAccountError("Savings balance cannot be negative.")
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        return _describe(self)

    def get_account_type(self) -> str:
        return self.account_type.value

    def set_interest_rate(self, rate) -> None:
        """Set the interest rate; negative rates are rejected."""
        rate = to_decimal(rate, InvalidRateError)
        if rate < 0:
            raise InvalidRateError("Interest rate cannot be negative.")
        self.interest_rate = rate

    def deposit(self, amount) -> Decimal:
        """Deposit money and return the new balance."""
        return _credit(self, amount)

    def withdraw(self, amount) -> bool:
        """Withdraw money if the balance covers it."""
        amount = _positive_amount(amount, "Withdrawal")
        if amount > self.balance:
            logger.warning(
                f"Withdrawal of {format_amount(amount)} from {self.account_number} failed: "
                f"insufficient funds (balance: {format_amount(self.balance)})"
            )
            return False

        self.balance -= amount
        logger.info(
            f"Withdrew {format_amount(amount)} from {self.account_number} "
            f"(New balance: {format_amount(self.balance)})"
        )
        return True

    def check_balance(self) -> Decimal:
        """Report and return the current balance."""
        return _report_balance(self)

    def calculate_interest(self) -> Decimal:
        """Interest due on the current balance. Not rounded; only display is."""
        return self.balance * self.interest_rate

    def add_interest(self) -> Decimal:
        """
        Apply interest on the current balance.

        Interest is simple and only accrues when this method is called. Each
        call recomputes from the balance at that moment, so repeated calls
        compound.

        Returns:
            The interest deposited, or zero when nothing was added.
        """
        interest = self.calculate_interest()
        if interest > 0:
            self.deposit(interest)
            logger.info(
                f"Interest {format_amount(interest)} added to Savings {self.account_number} "
                f"at rate {format_amount(self.interest_rate * 100)}%"
            )
            return interest

        logger.info(f"No interest added to {self.account_number}")
        return Decimal('0.00')


@dataclass(eq=False)
class CurrentAccount:
    """Current account that may be overdrawn down to its overdraft limit."""

    account_type: ClassVar[AccountType] = AccountType.CURRENT

    account_number: str
    account_holder: str
    balance: Decimal = Decimal('0.00')
    overdraft_limit: Decimal = Decimal('0.00')

    def __post_init__(self):
        _validate_identity(self.account_number, self.account_holder)
        self.balance = _opening_balance(self.balance)
        self.set_overdraft_limit(self.overdraft_limit)

    def __setattr__(self, name, value):
        object.__setattr__(self, name, _checked_assignment(self, name, value))

    def __str__(self) -> str:
        return _describe(self)

    def get_account_type(self) -> str:
        return self.account_type.value

    def set_overdraft_limit(self, limit) -> None:
        """Set the overdraft limit; negative limits are rejected."""
        limit = to_decimal(limit, InvalidOverdraftLimitError)
        if limit < 0:
            raise InvalidOverdraftLimitError("Overdraft limit cannot be negative.")
        if limit < -self.balance:
            raise InvalidOverdraftLimitError(
                f"Overdraft limit {format_amount(limit)} is below the overdrawn "
                f"balance of {self.account_number} ({format_amount(self.balance)})."
            )
        self.overdraft_limit = limit

    @property
    def available_funds(self) -> Decimal:
        """Balance plus the unused part of the overdraft."""
        return self.balance + self.overdraft_limit

    def deposit(self, amount) -> Decimal:
        """Deposit money and return the new balance."""
        return _credit(self, amount)

    def withdraw(self, amount) -> bool:
        """Withdraw money, allowing the balance to go negative up to the overdraft limit."""
        amount = _positive_amount(amount, "Withdrawal")
        allowed = self.available_funds
        if amount > allowed:
            logger.warning(
                f"Withdrawal of {format_amount(amount)} from {self.account_number} failed: "
                f"exceeds overdraft limit (allowed: {format_amount(allowed)})"
            )
            return False

        self.balance -= amount
        logger.info(
            f"Withdrew {format_amount(amount)} from {self.account_number} "
            f"(New balance: {format_amount(self.balance)}) "
            f"[Overdraft limit: {format_amount(self.overdraft_limit)}]"
        )
        return True

    def check_balance(self) -> Decimal:
        """Report and return the current balance."""
        return _report_balance(self)


def as_savings(account: Account) -> Optional[SavingsAccount]:
    """Return the savings handle for ``account``, or None for other variants."""
    if account.account_type is AccountType.SAVINGS:
        return cast(SavingsAccount, account)
    return None
