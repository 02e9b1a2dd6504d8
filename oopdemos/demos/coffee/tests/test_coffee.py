"""Tests for the coffee shop demo."""

import io

import pytest
from rich.console import Console

from oopdemos.demos.coffee import demo
from oopdemos.demos.coffee.shop import Coffee, Owner, RoastLevel, Store
from oopdemos.errors import InsufficientStockError, InvalidAmountError


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def store(console):
    s = Store(Owner("Jasper", 5), "Boss Coffee", "Downtown", console=console)
    s.add_coffee(Coffee("Native Blend", 100, "Sultan Kudarat", RoastLevel.DARK, 50))
    s.add_coffee(Coffee("Premium Arabica", 25, "Benguet", stock=20))
    s.add_coffee(Coffee("Espresso Roast", 15, "Sagada", RoastLevel.DARK, 0))
    return s


# --- Coffee ---

def test_negative_price_rejected():
    c = Coffee("X", 10, "Y")
    with pytest.raises(InvalidAmountError):
        c.price = -1
    assert c.price == 10


def test_negative_stock_rejected_in_constructor():
    with pytest.raises(InvalidAmountError):
        Coffee("X", 10, "Y", stock=-3)


def test_reduce_stock_beyond_available_leaves_stock():
    c = Coffee("X", 10, "Y", stock=2)
    with pytest.raises(InsufficientStockError):
        c.reduce_stock(3)
    assert c.stock == 2


def test_default_roast_is_medium():
    assert Coffee("X", 1, "Y").roast_level is RoastLevel.MEDIUM


def test_details_format():
    c = Coffee("Native Blend", 95, "Sultan Kudarat", "dark", 60)
    assert c.details() == "Native Blend from Sultan Kudarat (dark roast) - $95.00 (Stock: 60)"


# --- Store ---

def test_sell_books_revenue_and_stock(store):
    assert store.sell_coffee("Native Blend", 2) is True
    assert store.find_coffee("native").stock == 48
    assert store.total_revenue == 200.0


def test_oversell_fails_without_side_effects(store):
    assert store.sell_coffee("Premium Arabica", 21) is False
    assert store.find_coffee("arabica").stock == 20
    assert store.total_revenue == 0.0


def test_sell_out_of_stock_and_unknown(store):
    assert store.sell_coffee("Espresso Roast") is False
    assert store.sell_coffee("Decaf") is False


def test_find_is_case_insensitive_substring(store):
    assert store.find_coffee("ARABICA").name == "Premium Arabica"
    assert store.find_coffee("nothing") is None


def test_available_coffees_skip_sold_out(store):
    names = [c.name for c in store.available_coffees()]
    assert names == ["Native Blend", "Premium Arabica"]


def test_remove_coffee(store):
    assert store.remove_coffee("Espresso Roast") is True
    assert store.remove_coffee("Espresso Roast") is False
    assert len(store.coffees) == 2


def test_reports(store):
    assert store.inventory_value() == 100 * 50 + 25 * 20
    assert store.most_expensive().name == "Native Blend"
    assert store.cheapest().name == "Espresso Roast"


def test_reports_on_empty_store(console):
    empty = Store(Owner("A"), "Empty", "Nowhere", console=console)
    assert empty.most_expensive() is None
    assert empty.cheapest() is None
    assert empty.inventory_value() == 0


def test_store_info_mentions_owner(store):
    assert "Owner: Jasper" in store.store_info()


def test_demo_runs(console):
    demo.run(console)
    out = console.file.getvalue()
    assert "Sold 2x Native Blend" in out
    assert "Espresso Roast is out of stock" in out
