"""Scripted game character run."""

from __future__ import annotations

import random
from typing import Optional

from rich.console import Console

from oopdemos.demos.game.characters import BattleManager, CharacterFactory
from oopdemos.demos.game.equipment import Armor, Weapon
from oopdemos.demos.game.stats import GameStats
from oopdemos.environment import default_console
from oopdemos.errors import UnknownCharacterTypeError


def run(console: Console, rng: Optional[random.Random] = None) -> None:
    console.print("[bold]=== GAME CHARACTER SYSTEM ===[/bold]\n")
    GameStats.reset()

    warrior = CharacterFactory.create("warrior", "C001", "Thorin", 3, console=console)
    mage = CharacterFactory.create("mage", "C002", "Gandalf", 2, console=console)
    archer = CharacterFactory.create("archer", "C003", "Legolas", 4, console=console, rng=rng)

    try:
        CharacterFactory.create("bard", "C004", "Dandelion")
    except UnknownCharacterTypeError as e:
        console.print(f"❌ {e}")

    warrior.equip_weapon(Weapon("Excalibur", 15, 2, 100))
    warrior.equip_armor(Armor("Plate Mail", 0, 20, 120))
    mage.equip_weapon(Weapon("Staff of Power", 8, 5, 80))
    mage.equip_armor(Armor("Mage Robe", 2, 8, 60))
    archer.equip_weapon(Weapon("Elven Bow", 12, 1, 90))
    archer.equip_armor(Armor("Leather Armor", 1, 12, 100))

    for character in (warrior, mage, archer):
        console.print(character.info())

    console.print("\n[bold]=== SPECIAL ATTACKS ===[/bold]")
    mage.special_attack(archer)
    archer.special_attack(mage)
    warrior.special_attack(archer)

    first_winner = BattleManager.fight(warrior, mage, console=console)

    warrior.heal(50)
    mage.heal(50)

    if first_winner:
        champion = BattleManager.fight(first_winner, archer, console=console)
        console.print(f"\n🎊 FINAL CHAMPION: {champion.name if champion else 'No one'}")

    console.print(GameStats.get_instance().stats())


if __name__ == "__main__":
    run(default_console())
