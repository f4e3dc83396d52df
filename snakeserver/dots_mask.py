"""Two-dimensional masks of dots used to build shaped objects."""

from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence

from snakeserver.dot import Dot
from snakeserver.location import Location

_MAX_SIDE = 256


class DotsMask:
    """A grid of cells where non-zero cells mark dots of a shape.

    Rows may have different lengths; missing cells count as empty.
    At most 256 rows of at most 256 cells are kept.
    """

    __slots__ = ("_rows",)

    def __init__(self, mask: Iterable[Sequence[int]] = ()) -> None:
        rows = list(mask)[:_MAX_SIDE]
        self._rows = [list(row[:_MAX_SIDE]) for row in rows]

    @classmethod
    def _wrap(cls, rows: list[list[int]]) -> DotsMask:
        instance = cls.__new__(cls)
        instance._rows = rows
        return instance

    @property
    def mask(self) -> list[list[int]]:
        """A copy of the rows of the mask."""
        return [list(row) for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DotsMask):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DotsMask({self._rows!r})"

    def copy(self) -> DotsMask:
        """Return an independent copy of the mask."""
        return DotsMask._wrap([list(row[:_MAX_SIDE]) for row in self._rows])

    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self._rows), default=0)

    def height(self) -> int:
        """Number of rows."""
        return len(self._rows)

    def turn_over(self) -> DotsMask:
        """Flip the mask upside down, padding rows to full width."""
        width = self.width()
        return DotsMask._wrap(
            [row + [0] * (width - len(row)) for row in reversed(self._rows)]
        )

    def turn_right(self) -> DotsMask:
        """Rotate the mask a quarter turn clockwise."""
        height = self.height()
        result = zero_dots_mask(height, self.width())
        for i, row in enumerate(self._rows):
            for j, cell in enumerate(row):
                result._rows[j][height - 1 - i] = cell
        return result

    def turn_left(self) -> DotsMask:
        """Rotate the mask a quarter turn counter-clockwise."""
        width = self.width()
        result = zero_dots_mask(self.height(), width)
        for i, row in enumerate(self._rows):
            for j, cell in enumerate(row):
                result._rows[width - 1 - j][i] = cell
        return result

    def turn_random(self, rng: Optional[random.Random] = None) -> DotsMask:
        """Return a copy, a right turn, a left turn or a flip, chosen at random."""
        choice = (rng or random).randrange(4)
        if choice == 0:
            return self.copy()
        if choice == 1:
            return self.turn_right()
        if choice == 2:
            return self.turn_left()
        return self.turn_over()

    def location(self, x: int, y: int) -> Location:
        """Dots of the mask placed with its top-left corner at (x, y)."""
        return Location(
            Dot((x + j) & 0xFF, (y + i) & 0xFF)
            for i, row in enumerate(self._rows)
            for j, cell in enumerate(row)
            if cell > 0
        )

    def empty(self) -> bool:
        """Return True if no cell is set."""
        return not any(cell > 0 for row in self._rows for cell in row)

    def dot_count(self) -> int:
        """Number of set cells."""
        return sum(1 for row in self._rows for cell in row if cell > 0)


def zero_dots_mask(width: int, height: int) -> DotsMask:
    """A mask of the given size with every cell empty."""
    return DotsMask._wrap([[0] * width for _ in range(height)])


def location_to_dots_mask(location: Sequence[Dot]) -> DotsMask:
    """Build the smallest mask covering the dots of a location."""
    if len(location) == 0:
        return DotsMask._wrap([])
    if len(location) == 1:
        return DotsMask._wrap([[1]])

    left_x = min(dot.x for dot in location)
    right_x = max(dot.x for dot in location)
    top_y = min(dot.y for dot in location)
    bottom_y = max(dot.y for dot in location)

    if left_x == right_x and top_y == bottom_y:
        return DotsMask._wrap([[1]])

    mask = zero_dots_mask(right_x - left_x + 1, bottom_y - top_y + 1)
    for dot in location:
        mask._rows[dot.y - top_y][dot.x - left_x] = 1
    return mask


DOTS_MASK_SQUARE_2X2 = DotsMask([
    [1, 1],
    [1, 1],
])

DOTS_MASK_TANK = DotsMask([
    [0, 1, 0],
    [1, 1, 1],
    [1, 0, 1],
])

DOTS_MASK_HOME_1 = DotsMask([
    [1, 1, 0, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
])

DOTS_MASK_HOME_2 = DotsMask([
    [1, 1, 1, 0, 0, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 1, 0, 0, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 0, 0, 1, 1, 1],
])

DOTS_MASK_CROSS = DotsMask([
    [0, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0],
    [1, 1, 1, 1, 1, 1, 1],
    [0, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0],
])

DOTS_MASK_DIAGONAL = DotsMask([
    [0, 0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 1, 0],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0, 0],
])

DOTS_MASK_CROSS_SMALL = DotsMask([
    [0, 1, 0],
    [1, 1, 1],
    [0, 1, 0],
])

DOTS_MASK_DIAGONAL_SMALL = DotsMask([
    [1, 0, 1],
    [0, 1, 0],
    [1, 0, 1],
])

DOTS_MASK_LABYRINTH = DotsMask([
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1, 0, 0, 1],
    [0, 0, 1, 0, 1, 0, 1, 1, 1, 1],
    [0, 0, 1, 0, 0, 0, 0, 0, 1, 0],
    [1, 0, 1, 0, 1, 0, 1, 0, 0, 0],
    [1, 0, 1, 0, 1, 0, 1, 1, 0, 1],
    [1, 0, 0, 0, 1, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
])

DOTS_MASK_TUNNEL_1 = DotsMask([
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 1],
])

DOTS_MASK_TUNNEL_2 = DotsMask([
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
])

_BIG_HOME_EDGE = [1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1]
_BIG_HOME_WALL = [1] + [0] * 18 + [1]
_BIG_HOME_GAP = [0] * 19 + [1]

DOTS_MASK_BIG_HOME = DotsMask(
    [_BIG_HOME_EDGE]
    + [_BIG_HOME_WALL] * 3
    + [_BIG_HOME_GAP] * 3
    + [_BIG_HOME_WALL] * 6
    + [_BIG_HOME_GAP] * 3
    + [_BIG_HOME_WALL] * 3
    + [_BIG_HOME_EDGE]
)