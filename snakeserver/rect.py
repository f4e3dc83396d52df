"""Rectangles on the game field."""

from __future__ import annotations

from dataclasses import dataclass

from snakeserver.dot import Dot
from snakeserver.location import Location


@dataclass(frozen=True)
class Rect:
    """A rectangle with its top-left corner at (x, y)."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def contains_dot(self, dot: Dot) -> bool:
        """Return True if the dot lies inside the rectangle."""
        return (
            self.x <= dot.x < self.x + self.width
            and self.y <= dot.y < self.y + self.height
        )

    def contains_rect(self, rect: Rect) -> bool:
        """Return True if the other rectangle lies entirely inside this one."""
        return (
            self.x <= rect.x
            and self.y <= rect.y
            and self.x + self.width >= rect.x + rect.width
            and self.y + self.height >= rect.y + rect.height
        )

    def equals(self, rect: Rect) -> bool:
        """Return True if both rectangles are identical."""
        return self == rect

    def dot_count(self) -> int:
        """Number of dots covered by the rectangle."""
        return self.width * self.height

    def dot(self, index: int) -> Dot:
        """Dot at the given row-major index."""
        return Dot(index % self.width + self.x, index // self.width + self.y)

    def dots(self) -> list[Dot]:
        """All dots of the rectangle in row-major order."""
        return [self.dot(i) for i in range(self.dot_count())]

    def location(self) -> Location:
        """The rectangle's dots as a location."""
        return Location(self.dots())

    def to_json(self) -> str:
        """Serialize as a JSON array ``[x,y,w,h]``."""
        return f"[{self.x},{self.y},{self.width},{self.height}]"