"""Account and Bank."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from rich.console import Console

from oopdemos.environment import default_console
from oopdemos.errors import (
    AccountNotActiveError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTransitionError,
)

logger = logging.getLogger(__name__)


class AccountStatus(str, Enum):
    ACTIVE = "active"
    FROZEN = "frozen"
    CLOSED = "closed"


class Account:
    """A balance that only moves through deposit() and withdraw()."""

    def __init__(self, account_number: str, initial_balance: float = 0) -> None:
        if initial_balance < 0:
            raise InvalidAmountError("Initial balance cannot be negative")
        self._account_number = account_number
        self._balance = float(initial_balance)
        self.status = AccountStatus.ACTIVE

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> float:
        return self._balance

    def _require_active(self) -> None:
        if self.status is not AccountStatus.ACTIVE:
            raise AccountNotActiveError(f"Account {self._account_number} is {self.status.value}")

    def deposit(self, amount: float) -> None:
        if amount <= 0:
            raise InvalidAmountError("Invalid amount")
        self._require_active()
        self._balance += amount
        logger.debug("Deposit %.2f into %s -> %.2f", amount, self._account_number, self._balance)

    def withdraw(self, amount: float) -> None:
        if amount <= 0:
            raise InvalidAmountError("Invalid amount")
        self._require_active()
        if amount > self._balance:
            raise InsufficientFundsError("Insufficient funds")
        self._balance -= amount
        logger.debug("Withdraw %.2f from %s -> %.2f", amount, self._account_number, self._balance)

    def freeze(self) -> None:
        if self.status is AccountStatus.CLOSED:
            raise InvalidTransitionError("Closed accounts cannot be frozen")
        self.status = AccountStatus.FROZEN
        logger.debug("Froze %s", self._account_number)

    def unfreeze(self) -> None:
        if self.status is not AccountStatus.FROZEN:
            raise InvalidTransitionError(f"Account is {self.status.value}, not frozen")
        self.status = AccountStatus.ACTIVE
        logger.debug("Unfroze %s", self._account_number)

    def close(self) -> None:
        """Close the account. The balance must be withdrawn first."""
        if self._balance != 0:
            raise InvalidTransitionError("Withdraw the remaining balance before closing")
        self.status = AccountStatus.CLOSED
        logger.debug("Closed %s", self._account_number)


class Bank:
    def __init__(self, console: Optional[Console] = None) -> None:
        self._accounts: list[Account] = []
        self._console = console or default_console()

    def create_account(self, account_number: str, initial_balance: float = 0) -> Account:
        if self.get_account(account_number) is not None:
            raise DuplicateAccountError(f"Account {account_number} already exists")
        account = Account(account_number, initial_balance)
        self._accounts.append(account)
        self._console.print(f"✅ Account {account_number} created with ₱{initial_balance:,.2f}")
        return account

    def get_account(self, account_number: str) -> Optional[Account]:
        return next((a for a in self._accounts if a.account_number == account_number), None)

    def total_deposits(self) -> float:
        return sum(a.balance for a in self._accounts)

    def accounts_by_status(self, status: AccountStatus) -> list[Account]:
        status = AccountStatus(status)
        return [a for a in self._accounts if a.status is status]
