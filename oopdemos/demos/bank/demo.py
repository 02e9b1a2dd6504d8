"""Scripted mini bank run."""

from __future__ import annotations

from rich.console import Console

from oopdemos.demos.bank.accounts import AccountStatus, Bank
from oopdemos.environment import default_console
from oopdemos.errors import AccountNotActiveError, InsufficientFundsError


def run(console: Console) -> None:
    console.print("[bold]=== MINI BANK ===[/bold]\n")

    bank = Bank(console=console)
    acc1 = bank.create_account("001", 500)
    acc1.deposit(200)
    acc1.withdraw(100)
    console.print(f"Final balance: {acc1.balance:,.2f}")

    acc2 = bank.create_account("002")
    try:
        acc2.withdraw(50)
    except InsufficientFundsError as e:
        console.print(f"❌ {e}")

    acc1.freeze()
    try:
        acc1.deposit(10)
    except AccountNotActiveError as e:
        console.print(f"❌ {e}")
    acc1.unfreeze()

    acc2.close()
    console.print(f"\nTotal deposits: {bank.total_deposits():,.2f}")
    active = bank.accounts_by_status(AccountStatus.ACTIVE)
    console.print(f"Active accounts: {', '.join(a.account_number for a in active)}")


if __name__ == "__main__":
    run(default_console())
