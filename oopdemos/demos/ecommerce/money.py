"""Money value object."""

from __future__ import annotations

from dataclasses import dataclass

from oopdemos.errors import CurrencyMismatchError, InsufficientFundsError, InvalidAmountError

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money:
    """An amount tied to one currency. Never negative, never mutated."""

    amount: float
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise InvalidAmountError("Amount cannot be negative")

    def _check_currency(self, other: Money, verb: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(f"Cannot {verb} different currencies")

    def add(self, other: Money) -> Money:
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._check_currency(other, "subtract")
        if self.amount < other.amount:
            raise InsufficientFundsError("Insufficient funds")
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: float) -> Money:
        return Money(self.amount * factor, self.currency)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"
