"""Weapons and armor."""

from __future__ import annotations

from abc import ABC, abstractmethod

from oopdemos.errors import InvalidAmountError


class Equipment(ABC):
    """Gear with stat bonuses that wears out with use."""

    def __init__(self, name: str, attack_bonus: int, defense_bonus: int, durability: int) -> None:
        if durability < 0:
            raise InvalidAmountError("Durability cannot be negative")
        self.name = name
        self.attack_bonus = attack_bonus
        self.defense_bonus = defense_bonus
        self.durability = durability

    @property
    @abstractmethod
    def slot(self) -> str:
        """Where the item is worn: "weapon" or "armor"."""

    def use(self) -> None:
        self.durability = max(0, self.durability - 1)

    @property
    def is_broken(self) -> bool:
        return self.durability <= 0

    def info(self) -> str:
        return (
            f"{self.name} (ATK: +{self.attack_bonus}, "
            f"DEF: +{self.defense_bonus}, DUR: {self.durability})"
        )


class Weapon(Equipment):
    @property
    def slot(self) -> str:
        return "weapon"


class Armor(Equipment):
    @property
    def slot(self) -> str:
        return "armor"
