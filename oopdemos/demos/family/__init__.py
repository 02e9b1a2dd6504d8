"""Family demo: single-level inheritance from a Person base class."""

NAME = "family"
DESCRIPTION = "Parents and children sharing a Person base class"
CONCEPTS = ("inheritance", "super()", "polymorphic collections")
