"""Game character demo: abstract classes, singleton and factory patterns.

Characters of three classes fight turn-based battles. A GameStats singleton
counts what happens across all of them.
"""

NAME = "game"
DESCRIPTION = "RPG characters, equipment and a turn-based battle loop"
CONCEPTS = ("abstract classes", "singleton", "factory", "class methods")
