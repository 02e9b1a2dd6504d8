"""Scripted e-commerce run."""

from __future__ import annotations

from rich.console import Console

from oopdemos.demos.ecommerce.money import Money
from oopdemos.demos.ecommerce.store import Customer, ECommerceStore, OrderStatus, Product
from oopdemos.environment import default_console
from oopdemos.errors import CurrencyMismatchError, EmptyCartError, InsufficientStockError


def run(console: Console) -> None:
    console.print("[bold]=== E-COMMERCE SYSTEM ===[/bold]\n")

    store = ECommerceStore(console=console)

    laptop = Product("P001", "Laptop", "High-performance laptop", Money(999.99), 10, "Electronics")
    mouse = Product("P002", "Mouse", "Wireless mouse", Money(29.99), 50, "Electronics")
    book = Product("P003", "Book", "Programming book", Money(49.99), 25, "Books")
    headphones = Product(
        "P004", "Headphones", "Noise-cancelling headphones", Money(199.99), 15, "Electronics"
    )
    for product in (laptop, mouse, book, headphones):
        store.add_product(product)

    john = Customer("C001", "John Doe", "john@email.com", "123 Main St", console=console)
    jane = Customer("C002", "Jane Smith", "jane@email.com", "456 Oak Ave", console=console)
    store.add_customer(john)
    store.add_customer(jane)

    console.print("\n[bold]=== CUSTOMER 1 SHOPPING ===[/bold]")
    john.add_to_cart(laptop, 1)
    john.add_to_cart(mouse, 2)
    john.add_to_cart(book, 1)
    john.add_to_cart(mouse, 1)  # merges into the existing line
    console.print(john.cart.cart_info())

    first = store.create_order("C001")
    first.update_status(OrderStatus.CONFIRMED)
    first.update_status(OrderStatus.SHIPPED)

    console.print("\n[bold]=== CUSTOMER 2 SHOPPING ===[/bold]")
    jane.add_to_cart(headphones, 1)
    jane.add_to_cart(mouse, 1)
    console.print(jane.cart.cart_info())

    try:
        jane.add_to_cart(laptop, 100)
    except InsufficientStockError as e:
        console.print(f"❌ {e}")

    second = store.create_order("C002")
    second.update_status(OrderStatus.CONFIRMED)

    try:
        store.create_order("C002")
    except EmptyCartError as e:
        console.print(f"❌ {e}")

    console.print("\n[bold]=== ORDER DETAILS ===[/bold]")
    console.print(first.order_info())
    console.print("\n" + second.order_info())

    console.print("\n[bold]=== CANCELLATION ===[/bold]")
    store.cancel_order(second.id)
    console.print(f"Headphones back in stock: {headphones.stock}")

    console.print("\n[bold]=== PRODUCT SEARCH ===[/bold]")
    for product in store.search_products("electronics"):
        console.print(product.info())

    console.print("\n[bold]=== MONEY ARITHMETIC ===[/bold]")
    try:
        Money(10) + Money(10, "EUR")
    except CurrencyMismatchError as e:
        console.print(f"❌ {e}")

    console.print(store.store_stats())


if __name__ == "__main__":
    run(default_console())
