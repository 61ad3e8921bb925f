"""Gem shapes that fill the cells of the board."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

Point = tuple[float, float]
Color = tuple[float, float, float]

_CIRCLE_PI = 3.1415926


@dataclass
class Gem(ABC):
    """A gem centred at (x, y); gems of the same kind match each other."""

    x: float
    y: float

    kind: ClassVar[str] = ""
    color: ClassVar[Color] = (1.0, 1.0, 1.0)

    @abstractmethod
    def shape(self) -> list[Point]:
        """Vertices of the gem relative to its centre."""

    def outline(self) -> list[Point]:
        """Vertices of the gem in board coordinates."""
        return [(self.x + dx, self.y + dy) for dx, dy in self.shape()]

    def move(self) -> None:
        """Gems do not move on their own."""


@dataclass
class Circle(Gem):
    radius: float = 0.0

    kind: ClassVar[str] = "Circle"
    color: ClassVar[Color] = (243 / 255, 202 / 255, 82 / 255)

    def shape(self) -> list[Point]:
        angles = (degree * _CIRCLE_PI / 180.0 for degree in range(360))
        return [(self.radius * math.cos(t), self.radius * math.sin(t)) for t in angles]


@dataclass
class Diamond(Gem):
    size: float = 0.0

    kind: ClassVar[str] = "Diamond"
    color: ClassVar[Color] = (1.0, 0.6, 0.6)

    def shape(self) -> list[Point]:
        half = self.size / 2.0
        return [(0.0, half), (-half, 0.0), (0.0, -half), (half, 0.0)]


@dataclass
class Pentagon(Gem):
    size: float = 0.0

    kind: ClassVar[str] = "Pentagon"
    color: ClassVar[Color] = (0.8, 0.4, 0.4)

    def shape(self) -> list[Point]:
        angles = (corner * 2.0 * math.pi / 5.0 for corner in range(5))
        return [(self.size * math.cos(a), self.size * math.sin(a)) for a in angles]


@dataclass
class Rectangle(Gem):
    width: float = 0.0
    height: float = 0.0

    kind: ClassVar[str] = "Rectangle"
    color: ClassVar[Color] = (1.0, 0.8, 0.6)

    def shape(self) -> list[Point]:
        hw, hh = self.width / 2.0, self.height / 2.0
        return [(-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)]


@dataclass
class Square(Gem):
    size: float = 0.0

    kind: ClassVar[str] = "Square"
    color: ClassVar[Color] = (0.6, 0.8, 1.0)

    def shape(self) -> list[Point]:
        half = self.size / 2.0
        return [(-half, -half), (half, -half), (half, half), (-half, half)]


@dataclass
class Triangle(Gem):
    size: float = 0.0

    kind: ClassVar[str] = "Triangle"
    color: ClassVar[Color] = (176 / 255, 197 / 255, 164 / 255)

    def shape(self) -> list[Point]:
        half = self.size / 2.0
        return [(0.0, half), (-half, -half), (half, -half)]