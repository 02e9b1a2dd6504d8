"""Tests for the library demo."""

import io

import pytest
from rich.console import Console

from oopdemos.demos.library import demo
from oopdemos.demos.library.catalog import (
    MAX_BORROWED_ITEMS,
    Book,
    Borrowable,
    Library,
    LibraryItem,
    Magazine,
    Member,
)
from oopdemos.errors import (
    AlreadyBorrowedError,
    BorrowLimitError,
    NotBorrowedError,
    NotFoundError,
)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def make_book(console, n=1, title=None):
    return Book(f"B{n:03d}", title or f"Book {n}", "Author", 100, "Fiction", console)


def test_items_satisfy_borrowable(console):
    assert isinstance(make_book(console), Borrowable)
    assert isinstance(Magazine("M1", "Tech", 1, "Pub", console), Borrowable)


def test_library_item_is_abstract():
    with pytest.raises(TypeError):
        LibraryItem("X", "Nothing")


def test_borrow_twice_fails(console):
    book = make_book(console)
    book.borrow("Alice")
    with pytest.raises(AlreadyBorrowedError):
        book.borrow("Bob")
    assert book.borrower == "Alice"


def test_return_when_not_borrowed_fails(console):
    with pytest.raises(NotBorrowedError):
        Magazine("M1", "Tech", 1, "Pub", console).return_item()


def test_return_clears_checkout_state(console):
    book = make_book(console)
    book.borrow("Alice")
    assert book.borrow_date is not None
    book.return_item()
    assert book.is_available()
    assert book.borrower is None
    assert book.borrow_date is None


def test_member_borrow_and_return(console):
    member = Member("U1", "Alice", "a@example.com", console)
    book = make_book(console)
    member.borrow_item(book)
    assert member.borrowed_items == [book]
    assert book.borrower == "Alice"
    member.return_item(book)
    assert member.borrowed_items == []
    assert book.is_available()


def test_item_held_by_one_member_only(console):
    alice = Member("U1", "Alice", "a@example.com", console)
    bob = Member("U2", "Bob", "b@example.com", console)
    book = make_book(console)
    alice.borrow_item(book)
    with pytest.raises(AlreadyBorrowedError):
        bob.borrow_item(book)
    assert bob.borrowed_items == []


def test_borrow_limit(console):
    member = Member("U1", "Alice", "a@example.com", console)
    for n in range(MAX_BORROWED_ITEMS):
        member.borrow_item(make_book(console, n))
    extra = make_book(console, 99)
    with pytest.raises(BorrowLimitError):
        member.borrow_item(extra)
    assert extra.is_available()
    assert len(member.borrowed_items) == MAX_BORROWED_ITEMS


def test_return_item_member_does_not_hold(console):
    member = Member("U1", "Alice", "a@example.com", console)
    with pytest.raises(NotFoundError):
        member.return_item(make_book(console))


def test_library_queries(console):
    library = Library("Central", console)
    ts = make_book(console, 1, "TypeScript Handbook")
    cc = make_book(console, 2, "Clean Code")
    mag = Magazine("M1", "Tech Weekly", 42, "Pub", console)
    for item in (ts, cc, mag):
        library.add_item(item)
    library.add_member(Member("U1", "Alice", "a@example.com", console))

    ts.borrow("Alice")
    assert library.search_by_title("typescript") == [ts]
    assert library.available_items() == [cc, mag]
    assert library.borrowed_items() == [ts]
    assert library.find_item("M1") is mag
    assert library.find_member("U1").name == "Alice"
    assert library.find_member("U9") is None
    stats = library.library_stats()
    assert "Available Items: 2" in stats
    assert "Borrowed Items: 1" in stats


def test_remove_item(console):
    library = Library("Central", console)
    book = make_book(console)
    library.add_item(book)
    book.borrow("Alice")
    assert library.remove_item(book.id) is False
    book.return_item()
    assert library.remove_item(book.id) is True
    assert f"✅ Removed {book.description()}" in console.file.getvalue()
    assert library.remove_item(book.id) is False


def test_demo_runs(console):
    demo.run(console)
    out = console.file.getvalue()
    assert 'Book "TypeScript Handbook" has been borrowed' in out
    assert "Item is not available for borrowing" in out
