"""
CLI interface for the bank ledger.

This module provides the console entry point, which runs a fixed
demonstration of accounts, transfers and interest against a fresh ledger.
"""

import click

from .bank import Bank
from .config import LOG_FORMATS, LOG_LEVELS, LedgerConfig
from .exceptions import LedgerError
from .logging_config import get_logger, setup_logging
from .models import Account, CurrentAccount, SavingsAccount, as_savings

logger = get_logger(__name__)


def run_demo(bank: Bank) -> Bank:
    """Run the demonstration sequence against ``bank`` and return it."""
    savings = SavingsAccount("SAV1001", "Alice Johnson", "1500.00", "0.03")
    current = CurrentAccount("CUR2001", "Bob Smith", "500.00", "300.00")

    bank.add_account(savings)
    bank.add_account(current)

    savings.check_balance()
    current.check_balance()

    savings.deposit("200.00")
    current.withdraw("600.00")
    current.withdraw("1000.00")

    savings.add_interest()

    bank.transfer("SAV1001", "CUR2001", "300.00")

    bank.print_all_accounts()

    # Held through the shared interface; interest needs the savings handle
    account: Account = SavingsAccount("SAV3002", "Charlie Park", "800.00", "0.05")
    bank.add_account(account)
    account.check_balance()
    savings_handle = as_savings(account)
    if savings_handle is not None:
        savings_handle.add_interest()

    bank.print_all_accounts()
    return bank


@click.group(invoke_without_command=True)
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help='Log level (overrides BANK_LEDGER_LOG_LEVEL)')
@click.option('--log-format', type=click.Choice(LOG_FORMATS),
              default=None, help='Output format (overrides BANK_LEDGER_LOG_FORMAT)')
@click.pass_context
def cli(ctx, log_level, log_format):
    """Bank Ledger CLI"""
    try:
        config = LedgerConfig.from_env().with_overrides(log_level, log_format)
    except LedgerError as e:
        raise click.ClickException(str(e))

    setup_logging(config.log_level, config.log_format)
    ctx.ensure_object(dict)
    ctx.obj['config'] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


@cli.command()
def demo():
    """Run the ledger demonstration."""
    bank = Bank()
    try:
        run_demo(bank)
    except LedgerError as e:
        logger.debug(f"Demo stopped: {e!r}")
        raise click.ClickException(str(e))


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
