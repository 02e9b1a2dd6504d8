"""Library items, members and the library itself."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from rich.console import Console

from oopdemos.environment import default_console
from oopdemos.errors import (
    AlreadyBorrowedError,
    BorrowLimitError,
    NotBorrowedError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

MAX_BORROWED_ITEMS = 5


@runtime_checkable
class Borrowable(Protocol):
    """Anything that can be checked out and brought back."""

    def borrow(self, borrower: str) -> None: ...

    def return_item(self) -> None: ...

    def is_available(self) -> bool: ...


class LibraryItem(ABC):
    """Shared state and checkout bookkeeping for all items."""

    kind = "Item"
    icon = "📦"

    def __init__(self, id: str, title: str, console: Optional[Console] = None) -> None:
        self.id = id
        self.title = title
        self.is_borrowed = False
        self.borrow_date: Optional[datetime] = None
        self.borrower: Optional[str] = None
        self._console = console or default_console()

    @abstractmethod
    def description(self) -> str:
        """One-line human description of the item."""

    def borrow(self, borrower: str) -> None:
        if self.is_borrowed:
            raise AlreadyBorrowedError(f'{self.kind} "{self.title}" is already borrowed')
        self.is_borrowed = True
        self.borrower = borrower
        self.borrow_date = datetime.now()
        logger.debug("%s borrowed by %s", self.id, borrower)
        self._console.print(f'{self.icon} {self.kind} "{self.title}" has been borrowed')

    def return_item(self) -> None:
        if not self.is_borrowed:
            raise NotBorrowedError(f'{self.kind} "{self.title}" is not currently borrowed')
        self.is_borrowed = False
        self.borrower = None
        self.borrow_date = None
        logger.debug("%s returned", self.id)
        self._console.print(f'{self.icon} {self.kind} "{self.title}" has been returned')

    def is_available(self) -> bool:
        return not self.is_borrowed

    def info(self) -> str:
        return f"ID: {self.id} | Title: {self.title} | Available: {self.is_available()}"


class Book(LibraryItem):
    kind = "Book"
    icon = "📖"

    def __init__(
        self,
        id: str,
        title: str,
        author: str,
        pages: int,
        genre: str,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(id, title, console)
        self.author = author
        self.pages = pages
        self.genre = genre

    def description(self) -> str:
        return f"Book: {self.title} by {self.author} ({self.pages} pages, {self.genre})"


class Magazine(LibraryItem):
    kind = "Magazine"
    icon = "📰"

    def __init__(
        self,
        id: str,
        title: str,
        issue_number: int,
        publisher: str,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(id, title, console)
        self.issue_number = issue_number
        self.publisher = publisher

    def description(self) -> str:
        return f"Magazine: {self.title} - Issue #{self.issue_number} ({self.publisher})"


class Member:
    def __init__(self, id: str, name: str, email: str, console: Optional[Console] = None) -> None:
        self.id = id
        self.name = name
        self.email = email
        self._borrowed: list[Borrowable] = []
        self._console = console or default_console()

    def borrow_item(self, item: Borrowable) -> None:
        if not item.is_available():
            raise AlreadyBorrowedError("Item is not available for borrowing")
        if len(self._borrowed) >= MAX_BORROWED_ITEMS:
            raise BorrowLimitError(f"Maximum borrowing limit reached ({MAX_BORROWED_ITEMS} items)")
        item.borrow(self.name)
        self._borrowed.append(item)
        self._console.print(f"{self.name} borrowed an item")

    def return_item(self, item: Borrowable) -> None:
        if item not in self._borrowed:
            raise NotFoundError("Item not found in member's borrowed items")
        item.return_item()
        self._borrowed.remove(item)
        self._console.print(f"{self.name} returned an item")

    @property
    def borrowed_items(self) -> list[Borrowable]:
        return list(self._borrowed)

    def info(self) -> str:
        return f"Member: {self.name} ({self.email}) - Borrowed: {len(self._borrowed)} items"


class Library:
    def __init__(self, name: str, console: Optional[Console] = None) -> None:
        self.name = name
        self._items: list[LibraryItem] = []
        self._members: list[Member] = []
        self._console = console or default_console()

    def add_item(self, item: LibraryItem) -> None:
        self._items.append(item)
        self._console.print(f"✅ Added item: {item.description()}")

    def add_member(self, member: Member) -> None:
        self._members.append(member)
        self._console.print(f"✅ Added member: {member.info()}")

    def remove_item(self, item_id: str) -> bool:
        """Drop an item from the catalogue. Borrowed items stay."""
        item = self.find_item(item_id)
        if item is None:
            self._console.print(f"❌ Item '{item_id}' not found")
            return False
        if item.is_borrowed:
            self._console.print(f"❌ Item '{item_id}' is checked out by {item.borrower}")
            return False
        self._items.remove(item)
        logger.debug("%s removed from catalogue", item_id)
        self._console.print(f"✅ Removed {item.description()}")
        return True

    def find_item(self, item_id: str) -> Optional[LibraryItem]:
        return next((i for i in self._items if i.id == item_id), None)

    def find_member(self, member_id: str) -> Optional[Member]:
        return next((m for m in self._members if m.id == member_id), None)

    def search_by_title(self, query: str) -> list[LibraryItem]:
        q = query.lower()
        return [i for i in self._items if q in i.title.lower()]

    def available_items(self) -> list[LibraryItem]:
        return [i for i in self._items if i.is_available()]

    def borrowed_items(self) -> list[LibraryItem]:
        return [i for i in self._items if not i.is_available()]

    def library_stats(self) -> str:
        total = len(self._items)
        available = len(self.available_items())
        return (
            f"\n📊 {self.name} Library Statistics:\n"
            f"- Total Items: {total}\n"
            f"- Available Items: {available}\n"
            f"- Borrowed Items: {total - available}\n"
            f"- Total Members: {len(self._members)}\n"
        )
