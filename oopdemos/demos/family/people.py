"""Person, Parent, Child and Family."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from rich.console import Console

from oopdemos.environment import default_console
from oopdemos.errors import InvalidAmountError


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Person:
    def __init__(self, name: str, age: int, gender: Gender) -> None:
        if age < 0:
            raise InvalidAmountError("Age cannot be negative")
        self.name = name
        self.age = age
        self.gender = Gender(gender)

    def introduce(self, console: Optional[Console] = None) -> None:
        (console or default_console()).print(f"Hi, I'm {self.name} {self.age} years old.")


class Parent(Person):
    def __init__(self, name: str, age: int, gender: Gender, occupation: str) -> None:
        super().__init__(name, age, gender)
        self.occupation = occupation
        self._children: list[Child] = []

    @property
    def children(self) -> list[Child]:
        return list(self._children)

    def add_child(self, child: Child, console: Optional[Console] = None) -> None:
        self._children.append(child)
        (console or default_console()).print(f"{child.name} is now a child of {self.name}.")

    def list_children(self, console: Optional[Console] = None) -> None:
        console = console or default_console()
        if not self._children:
            console.print(f"{self.name} has no children yet.")
            return
        console.print(f"{self.name}'s children:")
        for child in self._children:
            console.print(f"👶 {child.name} ({child.age} years old)")

    def work(self, console: Optional[Console] = None) -> None:
        (console or default_console()).print(f"{self.name} is working as a {self.occupation}.")


class Child(Person):
    def __init__(self, name: str, age: int, gender: Gender, school: str, hobby: str) -> None:
        super().__init__(name, age, gender)
        self.school = school
        self.hobby = hobby

    def play(self, console: Optional[Console] = None) -> None:
        (console or default_console()).print(f"Hi, I'm {self.name} I love playing {self.hobby}")

    def study(self, console: Optional[Console] = None) -> None:
        (console or default_console()).print(f"I love studying at {self.school}")


class Family:
    """Any mix of Person subclasses, in the order they joined."""

    def __init__(self) -> None:
        self._members: list[Person] = []

    def add_member(self, member: Person) -> None:
        self._members.append(member)

    @property
    def size(self) -> int:
        return len(self._members)

    def find_member(self, name: str) -> Optional[Person]:
        return next((m for m in self._members if m.name == name), None)

    def parents(self) -> list[Parent]:
        return [m for m in self._members if isinstance(m, Parent)]

    def children(self) -> list[Child]:
        return [m for m in self._members if isinstance(m, Child)]

    def average_age(self) -> float:
        if not self._members:
            return 0.0
        return sum(m.age for m in self._members) / len(self._members)

    def oldest(self) -> Optional[Person]:
        return max(self._members, key=lambda m: m.age, default=None)

    def show_family(self, console: Optional[Console] = None) -> None:
        console = console or default_console()
        console.print("\nFamily Members:")
        for member in self._members:
            console.print(f"- {member.name}, {member.age} years old ({member.gender.value})")
