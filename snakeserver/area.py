"""The playing area and navigation across it."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from snakeserver.direction import Direction, InvalidDirectionError, valid_direction
from snakeserver.dot import Dot
from snakeserver.rect import Rect

_MIN_AREA_WIDTH = 10
_MIN_AREA_HEIGHT = 10


class InvalidAreaSizeError(ValueError):
    """Raised when an area would have no dots."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__("invalid area size")
        self.width = width
        self.height = height


class AreaNotContainsDotError(ValueError):
    """Raised when a dot lies outside the area."""

    def __init__(self, dot: Dot) -> None:
        super().__init__(f"area does not contain dot: {dot}")
        self.dot = dot


class NavigationError(ValueError):
    """Raised when navigation across the area fails."""

    def __init__(self, err: Exception) -> None:
        super().__init__(f"navigation error: {err}")
        self.err = err


@dataclass(frozen=True)
class Area:
    """A width by height field of dots; edges wrap around."""

    width: int = 0
    height: int = 0

    def size(self) -> int:
        """Number of dots in the area."""
        return self.width * self.height

    def dots(self) -> list[Dot]:
        """All dots, column by column."""
        return [Dot(x, y) for x in range(self.width) for y in range(self.height)]

    def contains_dot(self, dot: Dot) -> bool:
        """Return True if the dot lies inside the area."""
        return dot.x < self.width and dot.y < self.height

    def contains_rect(self, rect: Rect) -> bool:
        """Return True if the rectangle fits inside the area."""
        return (
            self.width >= rect.width + rect.x
            and self.height >= rect.height + rect.y
        )

    def contains_location(self, location: Iterable[Dot]) -> bool:
        """Return True if every dot lies inside the area."""
        return all(self.contains_dot(dot) for dot in location)

    def random_dot(self, x: int, y: int) -> Dot:
        """A random dot with coordinates not less than (x, y)."""
        return Dot(
            x + random.randrange(self.width - x),
            y + random.randrange(self.height - y),
        )

    def random_rect(self, rw: int, rh: int, sx: int, sy: int) -> Rect:
        """A random rw by rh rectangle placed no earlier than (sx, sy)."""
        if rw + sx > self.width or rh + sy > self.height:
            raise ValueError(
                "cannot get random rect on square: invalid Width or Height"
            )
        x, y = sx, sy
        if self.width - rw - x > 0:
            x += random.randrange(self.width - rw - x)
        if self.height - rh - y > 0:
            y += random.randrange(self.height - rh - y)
        return Rect(x, y, rw, rh)

    def navigate(self, dot: Dot, direction: int, distance: int) -> Dot:
        """The dot reached by moving a distance in a direction, wrapping at edges."""
        if distance == 0:
            return dot
        if not self.contains_dot(dot):
            raise NavigationError(AreaNotContainsDotError(dot))
        if not valid_direction(direction):
            raise NavigationError(InvalidDirectionError(direction))

        direction = Direction(direction)
        if direction is Direction.NORTH:
            return Dot(dot.x, (dot.y - distance) % self.height)
        if direction is Direction.SOUTH:
            return Dot(dot.x, (dot.y + distance) % self.height)
        if direction is Direction.EAST:
            return Dot((dot.x + distance) % self.width, dot.y)
        return Dot((dot.x - distance) % self.width, dot.y)

    def to_json(self) -> str:
        """Serialize as a JSON object with width and height."""
        return f'{{"width":{self.width},"height":{self.height}}}'

    def __str__(self) -> str:
        return f"[Area: width={self.width}; height={self.height}]"


def new_area(width: int, height: int) -> Area:
    """Create an area, rejecting zero-sized ones."""
    if width * height == 0:
        raise InvalidAreaSizeError(width, height)
    return Area(width, height)


def new_useful_area(width: int, height: int) -> Area:
    """Create an area big enough to play on."""
    if width < _MIN_AREA_WIDTH or height < _MIN_AREA_HEIGHT:
        raise ValueError("cannot add useless area with extra small size")
    return Area(width, height)