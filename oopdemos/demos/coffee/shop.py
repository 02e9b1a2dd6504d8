"""Coffee, Owner and Store classes for the coffee shop demo."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from rich.console import Console

from oopdemos.environment import default_console
from oopdemos.errors import InsufficientStockError, InvalidAmountError

logger = logging.getLogger(__name__)


class RoastLevel(str, Enum):
    """How dark the beans are roasted."""

    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"


class Coffee:
    """A coffee variety with a price and a stock count."""

    def __init__(
        self,
        name: str,
        price: float,
        origin: str,
        roast_level: RoastLevel = RoastLevel.MEDIUM,
        stock: int = 0,
    ) -> None:
        self.name = name
        self.origin = origin
        self.roast_level = RoastLevel(roast_level)
        self._price = 0.0
        self._stock = 0
        self.price = price
        self.stock = stock

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        if value < 0:
            raise InvalidAmountError("Price cannot be negative")
        self._price = float(value)

    @property
    def stock(self) -> int:
        return self._stock

    @stock.setter
    def stock(self, value: int) -> None:
        if value < 0:
            raise InvalidAmountError("Stock cannot be negative")
        self._stock = int(value)

    @property
    def in_stock(self) -> bool:
        return self._stock > 0

    def add_stock(self, amount: int) -> None:
        if amount < 0:
            raise InvalidAmountError("Cannot add negative stock")
        self._stock += amount
        logger.debug("Restocked %s: +%d -> %d", self.name, amount, self._stock)

    def reduce_stock(self, amount: int) -> None:
        """Take units out of stock. Raises and leaves stock alone when short."""
        if amount < 0:
            raise InvalidAmountError("Cannot reduce stock by a negative amount")
        if self._stock < amount:
            raise InsufficientStockError("Insufficient stock")
        self._stock -= amount
        logger.debug("Stock of %s: -%d -> %d", self.name, amount, self._stock)

    def details(self) -> str:
        return (
            f"{self.name} from {self.origin} ({self.roast_level.value} roast) "
            f"- ${self._price:.2f} (Stock: {self._stock})"
        )

    def display_details(self, console: Optional[Console] = None) -> None:
        (console or default_console()).print(f"☕ {self.details()}")


class Owner:
    """The person running a store."""

    def __init__(self, name: str, experience: int = 0) -> None:
        self.name = name
        self.experience = experience

    def introduce(self, console: Optional[Console] = None) -> None:
        (console or default_console()).print(
            f"👋 Hi! I'm {self.name}, owner with {self.experience} years of coffee experience"
        )

    def add_experience(self, years: int) -> None:
        if years < 0:
            raise InvalidAmountError("Experience cannot go backwards")
        self.experience += years


class Store:
    """A coffee store. Owns its menu, has an owner."""

    def __init__(
        self,
        owner: Owner,
        name: str,
        location: str,
        console: Optional[Console] = None,
    ) -> None:
        self.owner = owner
        self.name = name
        self.location = location
        self.total_revenue = 0.0
        self._coffees: list[Coffee] = []
        self._console = console or default_console()

    @property
    def coffees(self) -> list[Coffee]:
        return list(self._coffees)

    def add_coffee(self, coffee: Coffee) -> None:
        self._coffees.append(coffee)
        self._console.print(f"✅ Added {coffee.name} to {self.name}")

    def remove_coffee(self, coffee_name: str) -> bool:
        """Remove the coffee with exactly this name. Returns False when missing."""
        for i, coffee in enumerate(self._coffees):
            if coffee.name == coffee_name:
                del self._coffees[i]
                self._console.print(f"✅ Removed {coffee_name} from {self.name}")
                return True
        self._console.print(f"❌ Coffee '{coffee_name}' not found")
        return False

    def find_coffee(self, query: str) -> Optional[Coffee]:
        """First coffee whose name contains the query, case-insensitive."""
        q = query.lower()
        return next((c for c in self._coffees if q in c.name.lower()), None)

    def available_coffees(self) -> list[Coffee]:
        return [c for c in self._coffees if c.in_stock]

    def sell_coffee(self, coffee_name: str, quantity: int = 1) -> bool:
        """Sell units of a coffee and book the revenue.

        Returns False (stock and revenue untouched) when the coffee is unknown,
        sold out or short of the requested quantity.
        """
        if quantity <= 0:
            raise InvalidAmountError("Quantity must be positive")
        coffee = self.find_coffee(coffee_name)
        if coffee is None:
            self._console.print(f"❌ Coffee '{coffee_name}' not found")
            return False
        if not coffee.in_stock:
            self._console.print(f"❌ {coffee_name} is out of stock")
            return False
        if coffee.stock < quantity:
            self._console.print(f"❌ Only {coffee.stock} units of {coffee_name} available")
            return False

        coffee.reduce_stock(quantity)
        amount = coffee.price * quantity
        self.total_revenue += amount
        logger.debug("Revenue of %s now %.2f", self.name, self.total_revenue)
        self._console.print(f"💰 Sold {quantity}x {coffee_name} for ${amount:.2f}")
        return True

    def inventory_value(self) -> float:
        return sum(c.price * c.stock for c in self._coffees)

    def most_expensive(self) -> Optional[Coffee]:
        return max(self._coffees, key=lambda c: c.price, default=None)

    def cheapest(self) -> Optional[Coffee]:
        return min(self._coffees, key=lambda c: c.price, default=None)

    def display_menu(self) -> None:
        self._console.print(f"\n📋 {self.name} Menu ({self.location}):")
        if not self._coffees:
            self._console.print("   No coffees available")
            return
        for i, coffee in enumerate(self._coffees, 1):
            status = "✅" if coffee.in_stock else "❌"
            self._console.print(f"   {i}. {status} {coffee.details()}")

    def store_info(self) -> str:
        return (
            f"\n🏪 {self.name}\n"
            f"📍 Location: {self.location}\n"
            f"👤 Owner: {self.owner.name}\n"
            f"☕ Coffee Varieties: {len(self._coffees)}\n"
            f"💰 Total Revenue: ${self.total_revenue:.2f}\n"
        )

    def display_store_info(self) -> None:
        self._console.print(self.store_info())
