"""Scripted family run."""

from __future__ import annotations

from rich.console import Console

from oopdemos.demos.family.people import Child, Family, Gender, Parent
from oopdemos.environment import default_console


def run(console: Console) -> None:
    console.print("[bold]=== FAMILY ===[/bold]\n")

    father = Parent("John", 40, Gender.MALE, "Engineer")
    mother = Parent("Maria", 38, Gender.FEMALE, "Teacher")
    alex = Child("Alex", 10, Gender.MALE, "Greenwood Elementary", "basketball")
    ella = Child("Ella", 7, Gender.FEMALE, "Greenwood Elementary", "drawing")

    family = Family()
    for member in (father, mother, alex, ella):
        family.add_member(member)

    father.add_child(alex, console)
    father.add_child(ella, console)
    father.list_children(console)
    mother.list_children(console)

    father.work(console)
    mother.work(console)
    alex.study(console)
    ella.play(console)

    # Every member answers introduce(), whatever its subclass.
    for member in (father, alex):
        member.introduce(console)

    family.show_family(console)
    oldest = family.oldest()
    console.print(f"\nAverage age: {family.average_age():.1f}")
    if oldest:
        console.print(f"Oldest member: {oldest.name}")


if __name__ == "__main__":
    run(default_console())
