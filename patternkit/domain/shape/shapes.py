"""
Shapes with a narrow behavioral contract.

Each shape implements Shape directly. Square is not a Rectangle subclass:
Rectangle's width and height vary independently, a Square's side does not.
"""
import math
from abc import ABC, abstractmethod
from typing import Iterable

from patternkit.domain.base.exceptions import ValidationError


def _require_positive(name: str, value: float) -> float:
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}", {name: value})
    return float(value)


class Shape(ABC):
    """Capability contract for anything with an area and a perimeter."""

    @abstractmethod
    def area(self) -> float:
        """Surface area."""

    @abstractmethod
    def perimeter(self) -> float:
        """Length of the boundary."""


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = _require_positive("width", width)
        self.height = _require_positive("height", height)

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width}, height={self.height})"


class Square(Shape):
    def __init__(self, side: float):
        self.side = _require_positive("side", side)

    def area(self) -> float:
        return self.side ** 2

    def perimeter(self) -> float:
        return 4 * self.side

    def __repr__(self) -> str:
        return f"Square(side={self.side})"


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = _require_positive("radius", radius)

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius})"


def total_area(shapes: Iterable[Shape]) -> float:
    """Sum the areas of any shapes; new shape types need no change here."""
    return sum(shape.area() for shape in shapes)
