"""Process-wide game statistics."""

from __future__ import annotations

from typing import ClassVar, Optional


class GameStats:
    """Singleton counter shared by every character and battle.

    Use GameStats.get_instance(); constructing it directly gives a separate,
    unshared counter.
    """

    _instance: ClassVar[Optional[GameStats]] = None

    def __init__(self) -> None:
        self.characters_created = 0
        self.battles_fought = 0
        self.experience_gained = 0

    @classmethod
    def get_instance(cls) -> GameStats:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance; the next get_instance() starts from zero."""
        cls._instance = None

    def increment_characters_created(self) -> None:
        self.characters_created += 1

    def increment_battles_fought(self) -> None:
        self.battles_fought += 1

    def add_experience_gained(self, amount: int) -> None:
        self.experience_gained += amount

    def stats(self) -> str:
        return (
            "\n📊 GAME STATISTICS:\n"
            f"- Total Characters Created: {self.characters_created}\n"
            f"- Total Battles Fought: {self.battles_fought}\n"
            f"- Total Experience Gained: {self.experience_gained}\n"
        )
