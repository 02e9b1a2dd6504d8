"""Shapes and the manager that reports on them."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar, NamedTuple, Optional, Protocol, runtime_checkable

from rich.console import Console

from oopdemos.environment import default_console
from oopdemos.errors import InvalidShapeError

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    x: float
    y: float


@runtime_checkable
class Drawable(Protocol):
    def draw(self) -> None: ...

    def drawing_info(self) -> str: ...


@runtime_checkable
class Movable(Protocol):
    def move(self, x: float, y: float) -> None: ...

    @property
    def position(self) -> Position: ...


def _require_positive(**dimensions: float) -> None:
    for name, value in dimensions.items():
        if value <= 0:
            raise InvalidShapeError(f"{name} must be positive, got {value}")


class Shape(ABC):
    """A named, coloured figure placed at a point."""

    icon = "🔷"

    def __init__(
        self,
        x: float,
        y: float,
        color: str,
        name: str,
        console: Optional[Console] = None,
    ) -> None:
        self.x = x
        self.y = y
        self._color = color
        self.name = name
        self._console = console or default_console()

    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...

    @property
    @abstractmethod
    def shape_type(self) -> str:
        """Display label, e.g. "📐 Rectangle"."""

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = value
        self._console.print(f"🎨 {self.name} color changed to {value}")

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def move(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self._console.print(f"{self.icon} {self.name} moved to ({x}, {y})")

    def draw(self) -> None:
        self._console.print(f"🎨 Drawing {self.name} at ({self.x}, {self.y}) in {self._color}")

    def drawing_info(self) -> str:
        return f"{self.name} - Position: ({self.x}, {self.y}), Color: {self._color}"

    def info(self) -> str:
        return (
            f"\n{self.shape_type} - {self.name}\n"
            f"  Position: ({self.x}, {self.y})\n"
            f"  Color: {self._color}\n"
            f"  Area: {self.area():.2f}\n"
            f"  Perimeter: {self.perimeter():.2f}"
        )


class Rectangle(Shape):
    icon = "📐"

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str,
        name: str,
        console: Optional[Console] = None,
    ) -> None:
        _require_positive(width=width, height=height)
        super().__init__(x, y, color, name, console)
        self.width = width
        self.height = height

    @property
    def shape_type(self) -> str:
        return "📐 Rectangle"

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def set_dimensions(self, width: float, height: float) -> None:
        _require_positive(width=width, height=height)
        self.width = width
        self.height = height
        self._console.print(f"📐 {self.name} dimensions changed to {width}x{height}")

    def is_square(self) -> bool:
        return self.width == self.height


class Circle(Shape):
    icon = "⭕"

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        color: str,
        name: str,
        console: Optional[Console] = None,
    ) -> None:
        _require_positive(radius=radius)
        super().__init__(x, y, color, name, console)
        self._radius = radius

    @property
    def shape_type(self) -> str:
        return "⭕ Circle"

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        _require_positive(radius=value)
        self._radius = value
        self._console.print(f"⭕ {self.name} radius changed to {value}")

    @property
    def diameter(self) -> float:
        return 2 * self._radius

    def area(self) -> float:
        return math.pi * self._radius ** 2

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius


class Triangle(Shape):
    """Triangle given by its three side lengths."""

    icon = "🔺"

    def __init__(
        self,
        x: float,
        y: float,
        side1: float,
        side2: float,
        side3: float,
        color: str,
        name: str,
        console: Optional[Console] = None,
    ) -> None:
        _require_positive(side1=side1, side2=side2, side3=side3)
        if not (side1 + side2 > side3 and side1 + side3 > side2 and side2 + side3 > side1):
            raise InvalidShapeError(
                "Invalid triangle: sum of any two sides must be greater than the third side"
            )
        super().__init__(x, y, color, name, console)
        self.sides = (side1, side2, side3)

    @property
    def shape_type(self) -> str:
        return "🔺 Triangle"

    def area(self) -> float:
        # Heron's formula
        a, b, c = self.sides
        s = self.perimeter() / 2
        return math.sqrt(s * (s - a) * (s - b) * (s - c))

    def perimeter(self) -> float:
        return sum(self.sides)

    def triangle_type(self) -> str:
        a, b, c = self.sides
        if a == b == c:
            return "Equilateral"
        if a == b or b == c or a == c:
            return "Isosceles"
        return "Scalene"


class ShapeManager:
    """Keeps an ordered collection of shapes and reports over it.

    get_instance() returns the shared manager; direct construction gives an
    independent one.
    """

    _instance: ClassVar[Optional[ShapeManager]] = None

    def __init__(self, console: Optional[Console] = None) -> None:
        self._shapes: list[Shape] = []
        self._console = console or default_console()

    @classmethod
    def get_instance(cls, console: Optional[Console] = None) -> ShapeManager:
        if cls._instance is None:
            cls._instance = cls(console)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def add_shape(self, shape: Shape) -> None:
        self._shapes.append(shape)
        logger.debug("Managing %d shape(s)", len(self._shapes))
        self._console.print(f"✅ Added {shape.name} to shape manager")

    def remove_shape(self, name: str) -> bool:
        shape = self.get_shape(name)
        if shape is None:
            self._console.print(f"❌ Shape '{name}' not found")
            return False
        self._shapes.remove(shape)
        self._console.print(f"✅ Removed {name} from shape manager")
        return True

    def get_shape(self, name: str) -> Optional[Shape]:
        return next((s for s in self._shapes if s.name == name), None)

    def all_shapes(self) -> list[Shape]:
        return list(self._shapes)

    def total_area(self) -> float:
        return sum(s.area() for s in self._shapes)

    def total_perimeter(self) -> float:
        return sum(s.perimeter() for s in self._shapes)

    def draw_all(self) -> None:
        self._console.print("\n🎨 DRAWING ALL SHAPES:")
        for shape in self._shapes:
            shape.draw()

    def shapes_by_type(self, kind: str) -> list[Shape]:
        """Shapes whose type label contains kind, e.g. "Circle"."""
        return [s for s in self._shapes if kind in s.shape_type]

    def largest(self) -> Optional[Shape]:
        return max(self._shapes, key=lambda s: s.area(), default=None)

    def smallest(self) -> Optional[Shape]:
        return min(self._shapes, key=lambda s: s.area(), default=None)

    def statistics(self) -> str:
        largest = self.largest()
        smallest = self.smallest()
        lines = [
            "\n📊 SHAPE STATISTICS:",
            f"- Total Shapes: {len(self._shapes)}",
            f"- Total Area: {self.total_area():.2f}",
            f"- Total Perimeter: {self.total_perimeter():.2f}",
            f"- Largest Shape: {largest.name if largest else 'None'}",
            f"- Smallest Shape: {smallest.name if smallest else 'None'}",
            "",
            "Shape Types:",
        ]
        # dict keeps first-seen order
        counts: dict[str, int] = {}
        for shape in self._shapes:
            counts[shape.shape_type] = counts.get(shape.shape_type, 0) + 1
        lines += [f"  {kind}: {count}" for kind, count in counts.items()]
        return "\n".join(lines)
