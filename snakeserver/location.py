"""Ordered sets of dots."""

from __future__ import annotations

from typing import Iterable

from snakeserver.dot import Dot, hash_to_dot


class Location(tuple):
    """An immutable ordered sequence of dots."""

    def __new__(cls, dots: Iterable[Dot] = ()) -> Location:
        return super().__new__(cls, dots)

    def contains(self, dot: Dot) -> bool:
        """Return True if the dot is part of the location."""
        return dot in self

    def delete(self, dot: Dot) -> Location:
        """Return a copy without the first occurrence of the dot."""
        for index, item in enumerate(self):
            if item == dot:
                return Location(self[:index] + self[index + 1 :])
        return Location(self)

    def add(self, dot: Dot) -> Location:
        """Return a copy with the dot appended."""
        return Location((*self, dot))

    def reverse(self) -> Location:
        """Return the dots in reverse order."""
        return Location(reversed(self))

    def dot(self, index: int) -> Dot:
        """Return the dot at the given index."""
        return self[index]

    def dot_count(self) -> int:
        """Number of dots."""
        return len(self)

    def empty(self) -> bool:
        """Return True if there are no dots."""
        return len(self) == 0

    def copy(self) -> Location:
        """Return a copy of the location."""
        return Location(self)

    def equals(self, other: Location) -> bool:
        """Compare as sets of dots of the same length, ignoring order."""
        if len(self) != len(other):
            return False
        return not self.difference(other)

    def equals_strict(self, other: Location) -> bool:
        """Compare dot by dot, in order."""
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def difference(self, other: Location) -> Location:
        """Dots of this location missing from the other, then the reverse."""
        ours = [dot for dot in self if dot not in other]
        theirs = [dot for dot in other if dot not in self]
        return Location(ours + theirs)

    def intersection(self, other: Location) -> Location:
        """Common dots, scanning the shorter location against the longer one.

        Scanning stops as soon as a match is not followed by a matching
        successor in both sequences.
        """
        low, high = (other, self) if len(self) > len(other) else (self, other)
        high = list(high)
        result = []
        for i, low_dot in enumerate(low):
            done = False
            for j, high_dot in enumerate(high):
                if low_dot == high_dot:
                    result.append(high_dot)
                    if i + 1 < len(low) and j + 1 < len(high):
                        if low[i + 1] != high[j + 1]:
                            done = True
                    del high[j]
                    break
            if done:
                break
        return Location(result)

    def hashes(self) -> list[int]:
        """Hash codes of all dots, in order."""
        return [dot.hash_code() for dot in self]


def hash_to_location(hashes: Iterable[int]) -> Location:
    """Build a location from dot hash codes."""
    return Location(hash_to_dot(value) for value in hashes)