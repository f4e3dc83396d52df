"""Points on the game field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dot:
    """A point with 8-bit coordinates."""

    x: int = 0
    y: int = 0

    def equals(self, other: Dot) -> bool:
        """Return True if both dots have the same coordinates."""
        return self == other

    def hash_code(self) -> int:
        """Pack the dot into a 16-bit integer: x in the high byte, y in the low byte."""
        return (self.x << 8) | self.y

    def distance_to(self, other: Dot) -> int:
        """Manhattan distance between two dots."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_json(self) -> str:
        """Serialize the dot as a JSON array ``[x,y]``."""
        return f"[{self.x},{self.y}]"

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


def hash_to_dot(value: int) -> Dot:
    """Unpack a 16-bit integer produced by :meth:`Dot.hash_code`."""
    return Dot(x=(value & 0xFF00) >> 8, y=value & 0x00FF)