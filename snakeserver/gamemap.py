"""The game map: a grid of cells, each holding at most one container."""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from snakeserver.area import Area
from snakeserver.container import Container
from snakeserver.dot import Dot


class Map:
    """A thread-safe grid linking dots to containers."""

    def __init__(self, area: Area) -> None:
        self._area = area
        self._fields: list[list[Optional[Container]]] = [
            [None] * area.width for _ in range(area.height)
        ]
        self._lock = threading.Lock()

    @property
    def area(self) -> Area:
        """The area the map covers."""
        return self._area

    def _store(self, dot: Dot, container: Container) -> bool:
        row = self._fields[dot.y]
        if row[dot.x] is None:
            row[dot.x] = container
            return True
        return False

    def _empty_container(self, dot: Dot, container: Container) -> bool:
        row = self._fields[dot.y]
        if row[dot.x] is container:
            row[dot.x] = None
            return True
        return False

    def render(self) -> str:
        """A text picture of the map: ``x`` for occupied cells, ``.`` for empty."""
        lines = [f"Map size: {self._area}"]
        with self._lock:
            for y, row in enumerate(self._fields):
                cells = "".join(" ." if cell is None else " x" for cell in row)
                lines.append(f"{y:4d} |{cells}")
        return "\n".join(lines) + "\n"

    def has(self, dot: Dot) -> bool:
        """Return True if a container is linked with the dot."""
        with self._lock:
            return self._fields[dot.y][dot.x] is not None

    def set(self, dot: Dot, container: Container) -> None:
        """Link the container with the dot, replacing what was there."""
        if self._area.contains_dot(dot):
            with self._lock:
                self._fields[dot.y][dot.x] = container

    def get(self, dot: Dot) -> Optional[Container]:
        """The container linked with the dot, or None."""
        if not self._area.contains_dot(dot):
            return None
        with self._lock:
            return self._fields[dot.y][dot.x]

    def set_if_vacant(self, dot: Dot, container: Container) -> bool:
        """Link the container only if the dot is free; return True on success."""
        if not self._area.contains_dot(dot):
            return False
        with self._lock:
            return self._store(dot, container)

    def remove(self, dot: Dot) -> None:
        """Unlink whatever container is at the dot."""
        if self._area.contains_dot(dot):
            with self._lock:
                self._fields[dot.y][dot.x] = None

    def remove_container(self, dot: Dot, container: Container) -> None:
        """Unlink the dot only if it holds this very container."""
        if self._area.contains_dot(dot):
            with self._lock:
                self._empty_container(dot, container)

    def has_any(self, dots: Iterable[Dot]) -> bool:
        """Return True if any dot inside the area holds a container."""
        with self._lock:
            return any(
                self._fields[dot.y][dot.x] is not None
                for dot in dots
                if self._area.contains_dot(dot)
            )

    def has_all(self, dots: Iterable[Dot]) -> bool:
        """Return True if every dot lies in the area and holds a container."""
        with self._lock:
            return all(
                self._area.contains_dot(dot)
                and self._fields[dot.y][dot.x] is not None
                for dot in dots
            )

    def mget(self, dots: Iterable[Dot]) -> dict[Dot, Container]:
        """Containers linked with the given dots, keyed by dot."""
        items: dict[Dot, Container] = {}
        with self._lock:
            for dot in dots:
                if not self._area.contains_dot(dot):
                    continue
                container = self._fields[dot.y][dot.x]
                if container is not None:
                    items[dot] = container
        return items

    def mremove(self, dots: Iterable[Dot]) -> None:
        """Unlink every dot inside the area."""
        with self._lock:
            for dot in dots:
                if self._area.contains_dot(dot):
                    self._fields[dot.y][dot.x] = None

    def mremove_container(self, dots: Iterable[Dot], container: Container) -> None:
        """Unlink the dots that hold this very container."""
        with self._lock:
            for dot in dots:
                if self._area.contains_dot(dot):
                    self._empty_container(dot, container)

    def mset(self, dots: Iterable[Dot], container: Container) -> None:
        """Link the container with every dot inside the area."""
        with self._lock:
            for dot in dots:
                if self._area.contains_dot(dot):
                    self._fields[dot.y][dot.x] = container

    def mset_if_all_vacant(self, dots: Sequence[Dot], container: Container) -> bool:
        """Link the container with all dots, or with none if any is occupied."""
        with self._lock:
            stored: list[Dot] = []
            for dot in dots:
                if not self._area.contains_dot(dot):
                    continue
                if not self._store(dot, container):
                    for placed in reversed(stored):
                        self._empty_container(placed, container)
                    return False
                stored.append(dot)
            return True

    def mset_if_vacant(self, dots: Iterable[Dot], container: Container) -> list[Dot]:
        """Link the container with the free dots; return the dots linked."""
        with self._lock:
            return [
                dot
                for dot in dots
                if self._area.contains_dot(dot) and self._store(dot, container)
            ]