"""Products, carts, customers, orders and the store that ties them together."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from rich.console import Console

from oopdemos.demos.ecommerce.money import DEFAULT_CURRENCY, Money
from oopdemos.environment import default_console
from oopdemos.errors import (
    EmptyCartError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidTransitionError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

ORDER_ID_WIDTH = 6


def _sum_money(amounts: Iterable[Money]) -> Money:
    """Sum Money values. An empty sequence is zero in the default currency."""
    total: Optional[Money] = None
    for amount in amounts:
        total = amount if total is None else total + amount
    return total if total is not None else Money(0, DEFAULT_CURRENCY)


class Product:
    """Something the store sells."""

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        price: Money,
        stock: int,
        category: str,
    ) -> None:
        self.id = id
        self.name = name
        self.description = description
        self.price = price
        self.category = category
        self._stock = 0
        self.stock = stock

    @property
    def stock(self) -> int:
        return self._stock

    @stock.setter
    def stock(self, value: int) -> None:
        if value < 0:
            raise InvalidAmountError("Stock cannot be negative")
        self._stock = value

    @property
    def in_stock(self) -> bool:
        return self._stock > 0

    def reduce_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise InvalidAmountError("Cannot reduce stock by a negative amount")
        if quantity > self._stock:
            raise InsufficientStockError(f"Insufficient stock for {self.name}")
        self._stock -= quantity
        logger.debug("Stock of %s -> %d", self.id, self._stock)

    def add_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise InvalidAmountError("Cannot add negative stock")
        self._stock += quantity
        logger.debug("Stock of %s -> %d", self.id, self._stock)

    def info(self) -> str:
        return f"{self.name} - {self.price} (Stock: {self._stock})"


class CartItem:
    """One cart line: a product and how many of it."""

    def __init__(self, product: Product, quantity: int) -> None:
        self.product = product
        self._quantity = 0
        self.quantity = quantity

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        if value < 0:
            raise InvalidAmountError("Quantity cannot be negative")
        self._quantity = value

    @property
    def total_price(self) -> Money:
        return self.product.price * self._quantity

    def info(self) -> str:
        return f"{self.product.name} x{self._quantity} = {self.total_price}"


class ShoppingCart:
    """A customer's cart. Holds at most one line per product."""

    def __init__(self, customer_id: str, console: Optional[Console] = None) -> None:
        self.customer_id = customer_id
        self._items: list[CartItem] = []
        self._console = console or default_console()

    def _find(self, product_id: str) -> Optional[CartItem]:
        return next((i for i in self._items if i.product.id == product_id), None)

    def add_item(self, product: Product, quantity: int) -> None:
        """Add units of a product, merging with an existing line.

        Raises when the product is sold out or the resulting line quantity
        would exceed the product's stock.
        """
        if quantity <= 0:
            raise InvalidAmountError("Quantity must be positive")
        if not product.in_stock:
            raise InsufficientStockError(f"{product.name} is out of stock")

        existing = self._find(product.id)
        wanted = quantity + (existing.quantity if existing else 0)
        if wanted > product.stock:
            raise InsufficientStockError(f"Insufficient stock for {product.name}")

        if existing:
            existing.quantity = wanted
        else:
            self._items.append(CartItem(product, quantity))
        self._console.print(f"✅ Added {quantity}x {product.name} to cart")

    def remove_item(self, product_id: str) -> None:
        item = self._find(product_id)
        if item is None:
            raise NotFoundError("Item not found in cart")
        self._items.remove(item)
        self._console.print(f"❌ Removed {item.product.name} from cart")

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity. Zero drops the line."""
        item = self._find(product_id)
        if item is None:
            raise NotFoundError("Item not found in cart")
        if quantity > item.product.stock:
            raise InsufficientStockError(f"Insufficient stock for {item.product.name}")
        item.quantity = quantity
        if quantity == 0:
            self._items.remove(item)
        self._console.print(f"🔄 Updated quantity for {item.product.name}")

    def total_price(self) -> Money:
        return _sum_money(item.total_price for item in self._items)

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def clear(self) -> None:
        self._items = []
        self._console.print("🛒 Cart cleared")

    def cart_info(self) -> str:
        if not self._items:
            return "🛒 Cart is empty"
        lines = [f"🛒 Shopping Cart ({self.item_count()} items):"]
        lines += [f"{i}. {item.info()}" for i, item in enumerate(self._items, 1)]
        lines.append(f"Total: {self.total_price()}")
        return "\n".join(lines)


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_TERMINAL = (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


class Order:
    """A snapshot of a cart at checkout time."""

    def __init__(
        self,
        id: str,
        customer_id: str,
        items: list[CartItem],
        console: Optional[Console] = None,
    ) -> None:
        self.id = id
        self.customer_id = customer_id
        # Copy the lines so later cart edits do not rewrite the order.
        self._items = [CartItem(i.product, i.quantity) for i in items]
        self.total_amount = _sum_money(i.total_price for i in self._items)
        self.status = OrderStatus.PENDING
        self.order_date = datetime.now()
        self._console = console or default_console()

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    def update_status(self, status: OrderStatus) -> None:
        status = OrderStatus(status)
        if self.status in _TERMINAL:
            raise InvalidTransitionError(
                f"Order {self.id} is {self.status.value} and cannot become {status.value}"
            )
        self.status = status
        logger.debug("Order %s -> %s", self.id, status.value)
        self._console.print(f"📦 Order {self.id} status updated to: {status.value}")

    def order_info(self) -> str:
        lines = [
            f"📦 Order #{self.id} ({self.status.value})",
            f"Date: {self.order_date:%Y-%m-%d}",
            "Items:",
        ]
        lines += [f"  {i}. {item.info()}" for i, item in enumerate(self._items, 1)]
        lines.append(f"Total: {self.total_amount}")
        return "\n".join(lines)


class Customer:
    """A shopper. Owns a cart, keeps a history of orders."""

    def __init__(
        self,
        id: str,
        name: str,
        email: str,
        address: str,
        console: Optional[Console] = None,
    ) -> None:
        self.id = id
        self.name = name
        self.email = email
        self.address = address
        self.cart = ShoppingCart(id, console=console)
        self._orders: list[Order] = []

    def add_to_cart(self, product: Product, quantity: int) -> None:
        self.cart.add_item(product, quantity)

    @property
    def order_history(self) -> list[Order]:
        return list(self._orders)

    def add_order(self, order: Order) -> None:
        self._orders.append(order)

    def info(self) -> str:
        return f"Customer: {self.name} ({self.email}) - Orders: {len(self._orders)}"


class ECommerceStore:
    """The storefront: catalogue, customers and orders."""

    # Shared by all stores so order ids never repeat within a process.
    _order_counter = 1

    def __init__(self, console: Optional[Console] = None) -> None:
        self._products: list[Product] = []
        self._customers: list[Customer] = []
        self._orders: list[Order] = []
        self._console = console or default_console()

    @classmethod
    def generate_order_id(cls) -> str:
        order_id = f"ORD-{cls._order_counter:0{ORDER_ID_WIDTH}d}"
        ECommerceStore._order_counter += 1
        return order_id

    @classmethod
    def reset_order_counter(cls) -> None:
        ECommerceStore._order_counter = 1

    def add_product(self, product: Product) -> None:
        self._products.append(product)
        self._console.print(f"✅ Added product: {product.info()}")

    def add_customer(self, customer: Customer) -> None:
        self._customers.append(customer)
        self._console.print(f"✅ Added customer: {customer.info()}")

    def get_product(self, id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == id), None)

    def get_customer(self, id: str) -> Optional[Customer]:
        return next((c for c in self._customers if c.id == id), None)

    def get_order(self, id: str) -> Optional[Order]:
        return next((o for o in self._orders if o.id == id), None)

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    def search_products(self, query: str) -> list[Product]:
        """Products whose name, description or category contain the query."""
        q = query.lower()
        return [
            p for p in self._products
            if q in p.name.lower() or q in p.description.lower() or q in p.category.lower()
        ]

    def create_order(self, customer_id: str) -> Order:
        """Check out a customer's cart.

        All stock is checked before any is taken, so a failure leaves every
        product untouched and the cart intact.
        """
        customer = self.get_customer(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer not found: {customer_id}")

        cart = customer.cart
        if cart.item_count() == 0:
            raise EmptyCartError("Cart is empty")

        for item in cart.items:
            if item.quantity > item.product.stock:
                raise InsufficientStockError(f"Insufficient stock for {item.product.name}")

        order = Order(self.generate_order_id(), customer_id, cart.items, console=self._console)
        for item in cart.items:
            item.product.reduce_stock(item.quantity)
        self._orders.append(order)
        customer.add_order(order)
        cart.clear()

        logger.debug("Created %s for %s, total %s", order.id, customer_id, order.total_amount)
        self._console.print(f"✅ Order created: {order.id}")
        return order

    def cancel_order(self, order_id: str) -> None:
        """Cancel a live order and put its units back in stock."""
        order = self.get_order(order_id)
        if order is None:
            raise NotFoundError(f"Order not found: {order_id}")
        order.update_status(OrderStatus.CANCELLED)
        for item in order.items:
            item.product.add_stock(item.quantity)

    def total_revenue(self) -> Money:
        """Sum of all orders that were not cancelled."""
        return _sum_money(
            o.total_amount for o in self._orders if o.status is not OrderStatus.CANCELLED
        )

    def store_stats(self) -> str:
        return (
            "\n📊 E-COMMERCE STORE STATISTICS:\n"
            f"- Total Products: {len(self._products)}\n"
            f"- Total Customers: {len(self._customers)}\n"
            f"- Total Orders: {len(self._orders)}\n"
            f"- Total Revenue: {self.total_revenue()}\n"
        )
