"""Scripted coffee shop run."""

from __future__ import annotations

from rich.console import Console

from oopdemos.demos.coffee.shop import Coffee, Owner, RoastLevel, Store
from oopdemos.environment import default_console
from oopdemos.errors import InvalidAmountError


def run(console: Console) -> None:
    console.print("[bold]=== ENHANCED COFFEE SHOP SYSTEM ===[/bold]\n")

    owner = Owner("Jasper", 5)
    owner.introduce(console)

    store = Store(owner, "Boss Coffee", "Downtown Manila", console=console)
    store.display_store_info()

    native = Coffee("Native Blend", 100, "Sultan Kudarat", RoastLevel.DARK, 50)
    blanka = Coffee("Coffee Blanka", 13, "Pitogo", RoastLevel.LIGHT, 30)
    arabica = Coffee("Premium Arabica", 25, "Benguet", RoastLevel.MEDIUM, 20)
    espresso = Coffee("Espresso Roast", 15, "Sagada", RoastLevel.DARK, 0)

    for coffee in (native, blanka, arabica, espresso):
        store.add_coffee(coffee)

    store.display_menu()

    console.print("\n[bold]=== COFFEE OPERATIONS ===[/bold]")
    native.display_details(console)
    native.price = 95
    native.add_stock(10)
    console.print("After price change and restock:")
    native.display_details(console)

    try:
        native.price = -5
    except InvalidAmountError as e:
        console.print(f"❌ {e}")

    console.print("\n[bold]=== SALES DEMONSTRATION ===[/bold]")
    store.sell_coffee("Native Blend", 2)
    store.sell_coffee("Coffee Blanka", 1)
    store.sell_coffee("Premium Arabica", 3)
    store.sell_coffee("Espresso Roast", 1)  # sold out

    console.print("\n[bold]=== UPDATED STORE INFO ===[/bold]")
    store.display_store_info()

    console.print("\n[bold]=== SEARCH FUNCTIONALITY ===[/bold]")
    found = store.find_coffee("arabica")
    if found:
        console.print(f"Found: {found.details()}")

    console.print("\n[bold]=== AVAILABLE COFFEES ===[/bold]")
    for coffee in store.available_coffees():
        coffee.display_details(console)

    console.print("\n[bold]=== INVENTORY REPORT ===[/bold]")
    console.print(f"Inventory value: ${store.inventory_value():.2f}")
    priciest = store.most_expensive()
    cheapest = store.cheapest()
    if priciest and cheapest:
        console.print(f"Most expensive: {priciest.name}, cheapest: {cheapest.name}")


if __name__ == "__main__":
    run(default_console())
