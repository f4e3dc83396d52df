"""Movement directions."""

from __future__ import annotations

import random
from enum import IntEnum

from snakeserver.dot import Dot


class Direction(IntEnum):
    """Movement direction on the field."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __str__(self) -> str:
        return direction_label(self)


_DIRECTION_COUNT = len(Direction)

_LABELS = {
    Direction.NORTH: "north",
    Direction.EAST: "east",
    Direction.SOUTH: "south",
    Direction.WEST: "west",
}

_REVERSED = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


class InvalidDirectionError(ValueError):
    """Raised for a value that is not a valid direction."""

    def __init__(self, direction: int) -> None:
        super().__init__("invalid direction")
        self.direction = direction


class DirectionMarshalError(ValueError):
    """Raised when a direction cannot be serialized."""

    def __init__(self, err: Exception) -> None:
        super().__init__("cannot marshal direction")
        self.err = err


class ReverseDirectionError(ValueError):
    """Raised when a direction cannot be reversed."""

    def __init__(self, err: Exception) -> None:
        super().__init__("cannot reverse direction")
        self.err = err


def valid_direction(direction: int) -> bool:
    """Return True if the value is one of the known directions."""
    return 0 <= direction < _DIRECTION_COUNT


def direction_label(direction: int) -> str:
    """Return the lower-case name of a direction, or ``"unknown"``."""
    if valid_direction(direction):
        return _LABELS[Direction(direction)]
    return "unknown"


def random_direction() -> Direction:
    """Return a random direction."""
    return Direction(random.randrange(_DIRECTION_COUNT))


def calculate_direction(from_dot: Dot, to_dot: Dot) -> Direction:
    """Direction of the dominant axis from one dot to another.

    A random direction is returned for equal dots and exact diagonals.
    """
    if from_dot != to_dot:
        diff_x = abs(from_dot.x - to_dot.x)
        diff_y = abs(from_dot.y - to_dot.y)
        if diff_x > diff_y:
            return Direction.EAST if to_dot.x > from_dot.x else Direction.WEST
        if diff_y > diff_x:
            return Direction.SOUTH if to_dot.y > from_dot.y else Direction.NORTH
    return random_direction()


def direction_to_json(direction: int) -> str:
    """Serialize a direction as a JSON string."""
    if not valid_direction(direction):
        raise DirectionMarshalError(InvalidDirectionError(direction))
    return f'"{_LABELS[Direction(direction)]}"'


def reverse_direction(direction: int) -> Direction:
    """Return the opposite direction."""
    if not valid_direction(direction):
        raise ReverseDirectionError(InvalidDirectionError(direction))
    return _REVERSED[Direction(direction)]