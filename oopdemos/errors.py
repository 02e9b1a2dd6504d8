"""Exception hierarchy shared by every demo.

Business-rule violations derive from DemoError. Bad input also derives from
ValueError and failed lookups from KeyError, so callers that only know the
builtin types still catch them.
"""

from __future__ import annotations


class DemoError(Exception):
    """Root of all errors raised by demo classes."""


class NotFoundError(DemoError, KeyError):
    """A lookup that must succeed found nothing."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class InvalidAmountError(DemoError, ValueError):
    """A price, quantity, amount or weight is out of range."""


class InsufficientStockError(DemoError, ValueError):
    """Not enough units in stock."""


class InsufficientFundsError(DemoError, ValueError):
    """Not enough money for the operation."""


class CurrencyMismatchError(DemoError, ValueError):
    """Arithmetic between Money values of different currencies."""


class EmptyCartError(DemoError, ValueError):
    """An order was requested from an empty cart."""


class InvalidTransitionError(DemoError, ValueError):
    """A status change is not allowed from the current status."""


class InvalidShapeError(DemoError, ValueError):
    """Shape dimensions that cannot exist."""


class AlreadyBorrowedError(DemoError, ValueError):
    """The item is checked out already."""


class NotBorrowedError(DemoError, ValueError):
    """The item is not checked out."""


class BorrowLimitError(DemoError, ValueError):
    """The member holds the maximum number of items."""


class AccountNotActiveError(DemoError, ValueError):
    """Operation on a frozen or closed account."""


class DuplicateAccountError(DemoError, ValueError):
    """An account with that number exists already."""


class UnknownCharacterTypeError(DemoError, ValueError):
    """The character factory does not know the requested kind."""
