"""Character hierarchy, factory and battle loop."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from rich.console import Console

from oopdemos.demos.game.equipment import Armor, Weapon
from oopdemos.demos.game.stats import GameStats
from oopdemos.environment import default_console
from oopdemos.errors import InvalidAmountError, UnknownCharacterTypeError

logger = logging.getLogger(__name__)

MAX_ROUNDS = 20
ATTACK_EXPERIENCE = 10


class Character(ABC):
    """Base for every playable class.

    Stats scale with the starting level. Health is clamped to
    [0, max_health]; a character at 0 health is dead and can neither act
    nor be healed.
    """

    def __init__(
        self,
        id: str,
        name: str,
        level: int = 1,
        console: Optional[Console] = None,
    ) -> None:
        if level < 1:
            raise InvalidAmountError("Level starts at 1")
        self.id = id
        self.name = name
        self.level = level
        self.max_health = 100 + (level - 1) * 20
        self._health = self.max_health
        self.attack = 10 + (level - 1) * 5
        self.defense = 5 + (level - 1) * 3
        self.experience = 0
        self.experience_to_next_level = level * 100
        self.weapon: Optional[Weapon] = None
        self.armor: Optional[Armor] = None
        self._console = console or default_console()

        GameStats.get_instance().increment_characters_created()

    @property
    @abstractmethod
    def character_type(self) -> str:
        """Display label, e.g. "⚔️ Warrior"."""

    @abstractmethod
    def special_attack(self, target: Character) -> int:
        """Class-specific attack. Returns the damage dealt (0 if it failed)."""

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = max(0, min(value, self.max_health))

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    @property
    def total_attack(self) -> int:
        return self.attack + (self.weapon.attack_bonus if self.weapon else 0)

    @property
    def total_defense(self) -> int:
        return self.defense + (self.armor.defense_bonus if self.armor else 0)

    def equip_weapon(self, weapon: Weapon) -> None:
        self.weapon = weapon
        self._console.print(f"⚔️ {self.name} equipped {weapon.name}")

    def equip_armor(self, armor: Armor) -> None:
        self.armor = armor
        self._console.print(f"🛡️ {self.name} equipped {armor.name}")

    def _can_fight(self, target: Character, what: str) -> bool:
        if not self.is_alive or not target.is_alive:
            self._console.print(f"❌ Cannot {what} - character is dead")
            return False
        return True

    def _damage_against(self, target: Character, multiplier: float = 1) -> int:
        return max(1, int(self.total_attack * multiplier) - target.total_defense)

    def attack_target(self, target: Character) -> int:
        """Plain attack. Wears the weapon and earns experience."""
        if not self._can_fight(target, "attack"):
            return 0

        damage = self._damage_against(target)
        self._console.print(f"⚔️ {self.name} attacks {target.name} for {damage} damage!")
        target.take_damage(damage)

        if self.weapon:
            self.weapon.use()
            if self.weapon.is_broken:
                self._console.print(f"💔 {self.weapon.name} broke!")
                self.weapon = None

        self.gain_experience(ATTACK_EXPERIENCE)
        return damage

    def take_damage(self, damage: int) -> None:
        if damage < 0:
            raise InvalidAmountError("Damage cannot be negative")
        self.health = self._health - damage
        if not self.is_alive:
            logger.debug("%s died", self.name)
            self._console.print(f"💀 {self.name} has been defeated!")

    def gain_experience(self, amount: int) -> None:
        self.experience += amount
        GameStats.get_instance().add_experience_gained(amount)
        while self.experience >= self.experience_to_next_level:
            self._level_up()

    def _level_up(self) -> None:
        self.experience -= self.experience_to_next_level
        self.level += 1
        old_max = self.max_health
        self.max_health = 100 + (self.level - 1) * 20
        self.health = self._health + (self.max_health - old_max)
        self.attack += 5
        self.defense += 3
        self.experience_to_next_level = self.level * 100
        logger.debug("%s reached level %d", self.name, self.level)
        self._console.print(f"🎉 {self.name} leveled up to level {self.level}!")

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise InvalidAmountError("Heal amount cannot be negative")
        if not self.is_alive:
            self._console.print("❌ Cannot heal dead character")
            return
        self.health = self._health + amount
        self._console.print(f"💚 {self.name} healed for {amount} HP")

    def info(self) -> str:
        lines = [
            f"\n{self.character_type} - {self.name} (Level {self.level})",
            f"  HP: {self._health}/{self.max_health}",
            f"  ATK: {self.total_attack} (Base: {self.attack})",
            f"  DEF: {self.total_defense} (Base: {self.defense})",
            f"  EXP: {self.experience}/{self.experience_to_next_level}",
        ]
        if self.weapon:
            lines.append(f"  Weapon: {self.weapon.info()}")
        if self.armor:
            lines.append(f"  Armor: {self.armor.info()}")
        lines.append(f"  Status: {'Alive' if self.is_alive else 'Dead'}")
        return "\n".join(lines)


class Warrior(Character):
    def __init__(self, id: str, name: str, level: int = 1, console: Optional[Console] = None) -> None:
        super().__init__(id, name, level, console)
        self.attack += 5

    @property
    def character_type(self) -> str:
        return "⚔️ Warrior"

    def special_attack(self, target: Character) -> int:
        if not self._can_fight(target, "use special attack"):
            return 0
        damage = self._damage_against(target, 2)
        self._console.print(f"🔥 {self.name} uses POWER STRIKE on {target.name} for {damage} damage!")
        target.take_damage(damage)
        self.gain_experience(20)
        return damage


class Mage(Character):
    SPELL_COST = 20

    def __init__(self, id: str, name: str, level: int = 1, console: Optional[Console] = None) -> None:
        super().__init__(id, name, level, console)
        self.max_mana = 50 + (level - 1) * 10
        self.mana = self.max_mana
        self.defense -= 2

    @property
    def character_type(self) -> str:
        return "🧙 Mage"

    def special_attack(self, target: Character) -> int:
        if not self._can_fight(target, "use special attack"):
            return 0
        if self.mana < self.SPELL_COST:
            self._console.print("❌ Not enough mana for special attack")
            return 0
        self.mana -= self.SPELL_COST
        damage = self._damage_against(target, 3)
        self._console.print(f"⚡ {self.name} casts FIREBALL on {target.name} for {damage} damage!")
        target.take_damage(damage)
        self.gain_experience(25)
        return damage

    def info(self) -> str:
        return super().info() + f"\n  Mana: {self.mana}/{self.max_mana}"


class Archer(Character):
    def __init__(
        self,
        id: str,
        name: str,
        level: int = 1,
        console: Optional[Console] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(id, name, level, console)
        self.accuracy = 80 + (level - 1) * 5  # percent
        self._rng = rng or random.Random()

    @property
    def character_type(self) -> str:
        return "🏹 Archer"

    def special_attack(self, target: Character) -> int:
        if not self._can_fight(target, "use special attack"):
            return 0
        if self._rng.random() * 100 > self.accuracy:
            self._console.print(f"❌ {self.name}'s PRECISION SHOT missed!")
            return 0
        damage = self._damage_against(target, 2.5)
        self._console.print(f"🎯 {self.name} uses PRECISION SHOT on {target.name} for {damage} damage!")
        target.take_damage(damage)
        self.gain_experience(15)
        return damage

    def info(self) -> str:
        return super().info() + f"\n  Accuracy: {self.accuracy}%"


class CharacterKind(str, Enum):
    WARRIOR = "warrior"
    MAGE = "mage"
    ARCHER = "archer"


class CharacterFactory:
    """Builds characters from a kind name."""

    _classes: dict[CharacterKind, type[Character]] = {
        CharacterKind.WARRIOR: Warrior,
        CharacterKind.MAGE: Mage,
        CharacterKind.ARCHER: Archer,
    }

    @classmethod
    def create(
        cls,
        kind: str,
        id: str,
        name: str,
        level: int = 1,
        console: Optional[Console] = None,
        rng: Optional[random.Random] = None,
    ) -> Character:
        try:
            character_kind = CharacterKind(kind)
        except ValueError:
            raise UnknownCharacterTypeError(f"Invalid character type: {kind}") from None

        if character_kind is CharacterKind.ARCHER:
            return Archer(id, name, level, console, rng=rng)
        return cls._classes[character_kind](id, name, level, console)


class BattleManager:
    """Runs duels between two characters."""

    @staticmethod
    def fight(
        first: Character,
        second: Character,
        max_rounds: int = MAX_ROUNDS,
        console: Optional[Console] = None,
    ) -> Optional[Character]:
        """Alternate plain attacks, first goes first, for at most max_rounds.

        Returns the first character if still standing, else the second if
        standing, else None when both fell.
        """
        console = console or default_console()
        console.print(f"\n⚔️ BATTLE: {first.name} vs {second.name}")
        console.print("=" * 50)

        rounds = 0
        while first.is_alive and second.is_alive and rounds < max_rounds:
            rounds += 1
            console.print(f"\n--- Round {rounds} ---")
            first.attack_target(second)
            if not second.is_alive:
                break
            second.attack_target(first)

        GameStats.get_instance().increment_battles_fought()
        logger.debug("Battle %s vs %s ended after %d round(s)", first.name, second.name, rounds)

        if first.is_alive:
            console.print(f"\n🏆 {first.name} wins!")
            return first
        if second.is_alive:
            console.print(f"\n🏆 {second.name} wins!")
            return second
        console.print("\n💀 It's a draw - both characters died!")
        return None
