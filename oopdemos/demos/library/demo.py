"""Scripted library run."""

from __future__ import annotations

from rich.console import Console

from oopdemos.demos.library.catalog import Book, Library, Magazine, Member
from oopdemos.environment import default_console
from oopdemos.errors import AlreadyBorrowedError, NotFoundError


def run(console: Console) -> None:
    console.print("[bold]=== LIBRARY MANAGEMENT SYSTEM ===[/bold]\n")

    library = Library("Central Public Library", console=console)

    handbook = Book("B001", "TypeScript Handbook", "Microsoft", 450, "Programming", console)
    clean_code = Book("B002", "Clean Code", "Robert Martin", 320, "Software Engineering", console)
    patterns = Book("B003", "Design Patterns", "Gang of Four", 600, "Programming", console)
    tech = Magazine("M001", "Tech Weekly", 42, "Tech Publications", console)
    science = Magazine("M002", "Science Today", 15, "Science Press", console)

    for item in (handbook, clean_code, patterns, tech, science):
        library.add_item(item)

    alice = Member("U001", "Alice Johnson", "alice@email.com", console)
    bob = Member("U002", "Bob Smith", "bob@email.com", console)
    library.add_member(alice)
    library.add_member(bob)

    console.print("\n[bold]=== BORROWING ACTIVITIES ===[/bold]")
    alice.borrow_item(handbook)
    alice.borrow_item(tech)
    bob.borrow_item(clean_code)

    try:
        bob.borrow_item(handbook)
    except AlreadyBorrowedError as e:
        console.print(f"❌ {e}")

    console.print(library.library_stats())

    console.print("\n[bold]=== SEARCH RESULTS ===[/bold]")
    for item in library.search_by_title("TypeScript"):
        console.print(item.info())

    console.print("\n[bold]=== MEMBER BORROWED ITEMS ===[/bold]")
    console.print(alice.info())
    console.print(bob.info())

    console.print("\n[bold]=== RETURNING ITEMS ===[/bold]")
    alice.return_item(handbook)
    console.print(alice.info())

    try:
        bob.return_item(patterns)
    except NotFoundError as e:
        console.print(f"❌ {e}")


if __name__ == "__main__":
    run(default_console())
