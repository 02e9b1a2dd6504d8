"""Tests for the mini bank demo."""

import io
import logging

import pytest
from rich.console import Console

from oopdemos.demos.bank import demo
from oopdemos.demos.bank.accounts import Account, AccountStatus, Bank
from oopdemos.errors import (
    AccountNotActiveError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTransitionError,
)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def test_deposit_and_withdraw():
    acc = Account("001", 500)
    acc.deposit(200)
    acc.withdraw(100)
    assert acc.balance == 600


@pytest.mark.parametrize("amount", [0, -10])
def test_non_positive_deposit_fails(amount):
    acc = Account("001", 100)
    with pytest.raises(InvalidAmountError):
        acc.deposit(amount)
    assert acc.balance == 100


def test_negative_withdrawal_fails():
    with pytest.raises(InvalidAmountError):
        Account("001", 100).withdraw(-5)


def test_overdraw_fails_and_keeps_balance():
    acc = Account("001", 100)
    with pytest.raises(InsufficientFundsError):
        acc.withdraw(100.01)
    assert acc.balance == 100


def test_withdraw_entire_balance():
    acc = Account("001", 100)
    acc.withdraw(100)
    assert acc.balance == 0


def test_negative_opening_balance():
    with pytest.raises(InvalidAmountError):
        Account("001", -1)


def test_account_number_is_read_only():
    acc = Account("001")
    with pytest.raises(AttributeError):
        acc.account_number = "002"


def test_frozen_account_rejects_operations():
    acc = Account("001", 100)
    acc.freeze()
    with pytest.raises(AccountNotActiveError):
        acc.deposit(1)
    with pytest.raises(AccountNotActiveError):
        acc.withdraw(1)
    acc.unfreeze()
    acc.deposit(1)
    assert acc.balance == 101


def test_status_changes_are_logged(caplog):
    acc = Account("001", 100)
    with caplog.at_level(logging.DEBUG, logger="oopdemos.demos.bank.accounts"):
        acc.freeze()
        acc.unfreeze()
    assert "Froze 001" in caplog.text
    assert "Unfroze 001" in caplog.text

def test_close_requires_zero_balance():
    acc = Account("001", 5)
    with pytest.raises(InvalidTransitionError):
        acc.close()
    acc.withdraw(5)
    acc.close()
    assert acc.status is AccountStatus.CLOSED
    with pytest.raises(InvalidTransitionError):
        acc.freeze()


def test_bank_lookup_and_reports(console):
    bank = Bank(console=console)
    bank.create_account("001", 500)
    bank.create_account("002", 250)
    assert bank.get_account("002").balance == 250
    assert bank.get_account("999") is None
    assert bank.total_deposits() == 750
    bank.get_account("001").freeze()
    assert [a.account_number for a in bank.accounts_by_status("active")] == ["002"]


def test_duplicate_account_number(console):
    bank = Bank(console=console)
    bank.create_account("001")
    with pytest.raises(DuplicateAccountError):
        bank.create_account("001")


def test_demo_runs(console):
    demo.run(console)
    out = console.file.getvalue()
    assert "Final balance: 600.00" in out
    assert "Insufficient funds" in out
