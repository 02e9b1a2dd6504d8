"""Scripted shape calculator run."""

from __future__ import annotations

import random
from typing import Optional

from rich.console import Console

from oopdemos.demos.shapes.geometry import Circle, Movable, Rectangle, ShapeManager, Triangle
from oopdemos.environment import default_console
from oopdemos.errors import InvalidShapeError


def run(console: Console, rng: Optional[random.Random] = None) -> None:
    rng = rng or random.Random()
    console.print("[bold]=== SHAPE CALCULATOR SYSTEM ===[/bold]\n")

    ShapeManager.reset()
    manager = ShapeManager.get_instance(console)

    red = Rectangle(10, 20, 30, 40, "red", "Red Rectangle", console)
    blue = Rectangle(50, 60, 20, 20, "blue", "Blue Square", console)
    green = Circle(100, 100, 15, "green", "Green Circle", console)
    yellow = Circle(200, 200, 25, "yellow", "Yellow Circle", console)
    purple = Triangle(300, 300, 10, 10, 10, "purple", "Purple Triangle", console)
    orange = Triangle(400, 400, 15, 20, 25, "orange", "Orange Triangle", console)

    for shape in (red, blue, green, yellow, purple, orange):
        manager.add_shape(shape)

    try:
        Triangle(0, 0, 1, 2, 10, "black", "Impossible", console)
    except InvalidShapeError as e:
        console.print(f"❌ {e}")

    console.print("\n[bold]=== INDIVIDUAL SHAPE INFO ===[/bold]")
    for shape in manager.all_shapes():
        console.print(shape.info())

    manager.draw_all()

    console.print("\n[bold]=== MOVING SHAPES ===[/bold]")
    for shape in manager.all_shapes():
        if isinstance(shape, Movable):
            shape.move(rng.randrange(100), rng.randrange(100))

    console.print(manager.statistics())

    console.print("\n[bold]=== SPECIFIC SHAPE OPERATIONS ===[/bold]")
    console.print(f"Is {blue.name} a square? {blue.is_square()}")
    console.print(f"{green.name} diameter: {green.diameter}")
    console.print(f"{purple.name} type: {purple.triangle_type()}")
    console.print(f"{orange.name} area (Heron): {orange.area():.2f}")

    console.print("\n[bold]=== COLOR CHANGES ===[/bold]")
    red.color = "pink"
    green.color = "cyan"

    console.print("\n[bold]=== UPDATED SHAPE INFO ===[/bold]")
    console.print(red.info())
    console.print(green.info())


if __name__ == "__main__":
    run(default_console())
