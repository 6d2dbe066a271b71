"""
In-memory ledger for the bank.

This module contains the registry of accounts and the operations that span
more than one account.
"""

import logging
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from .exceptions import InvalidAccountError, InvalidAmountError
from .models import Account, format_amount, to_decimal

logger = logging.getLogger(__name__)


class Bank:
    """Registry of accounts keyed by account number, in insertion order."""

    def __init__(self, name: str = "Bank"):
        """Initialize an empty ledger."""
        self.name = name
        self._accounts: List[Account] = []

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __contains__(self, account_number) -> bool:
        return self.find_account_by_number(account_number) is not None

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """Registered accounts in insertion order."""
        return tuple(self._accounts)

    def add_account(self, account: Account) -> bool:
        """Register an account; returns False if the number is taken."""
        if account is None:
            raise InvalidAccountError("Account cannot be None.")

        if self.find_account_by_number(account.account_number) is not None:
            logger.warning(f"Account with number {account.account_number} already exists.")
            return False

        self._accounts.append(account)
        logger.info(f"Added {account}")
        return True

    def find_account_by_number(self, account_number: str) -> Optional[Account]:
        """Get account by account number."""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def transfer(self, from_account_number: str, to_account_number: str, amount) -> bool:
        """
        Move money from one account to another.

        The source is debited first using its own withdrawal rule. The
        destination is only credited once that withdrawal succeeded, so a
        failed transfer leaves both balances untouched.

        Args:
            from_account_number: Number of the account to debit
            to_account_number: Number of the account to credit
            amount: Positive amount to move

        Returns:
            True if the transfer completed, False otherwise
        """
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidAmountError("Transfer amount must be positive.")

        from_account = self.find_account_by_number(from_account_number)
        to_account = self.find_account_by_number(to_account_number)

        if from_account is None:
            logger.warning(f"From-account not found: {from_account_number}")
            return False
        if to_account is None:
            logger.warning(f"To-account not found: {to_account_number}")
            return False

        if not from_account.withdraw(amount):
            logger.warning("Transfer aborted: insufficient funds or limit reached.")
            return False

        to_account.deposit(amount)
        logger.info(
            f"Transfer of {format_amount(amount)} from {from_account_number} "
            f"to {to_account_number} completed."
        )
        return True

    def total_balance(self) -> Decimal:
        """Sum of all registered balances."""
        return sum((account.balance for account in self._accounts), Decimal('0.00'))

    def print_all_accounts(self) -> List[str]:
        """Report every account in insertion order and return the lines."""
        lines = [str(account) for account in self._accounts]
        logger.info("=== Bank Accounts Summary ===")
        for line in lines:
            logger.info(line)
        return lines
