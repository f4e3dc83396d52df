"""Wrapper for game objects placed on the map."""

from __future__ import annotations

from typing import Any


class Container:
    """Holds one game object; containers compare by identity."""

    __slots__ = ("object",)

    def __init__(self, obj: Any) -> None:
        self.object = obj

    def get_object(self) -> Any:
        """Return the wrapped object."""
        return self.object

    def __repr__(self) -> str:
        return f"Container({self.object!r})"