"""Listing of running games with sorting and limits."""

from __future__ import annotations

import random
import re
from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence

_SORTING_LABEL_SMART = "smart"
_SORTING_LABEL_RANDOM = "random"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class GamesSorting(IntEnum):
    """How the list of games is ordered."""

    UNDEFINED = 0
    SMART = 1
    RANDOM = 2


GAMES_SORTING_DEFAULT = GamesSorting.RANDOM


class InvalidSortingError(ValueError):
    """Raised for an unknown sorting label."""

    def __init__(self) -> None:
        super().__init__("invalid sorting")


class InvalidLimitError(ValueError):
    """Raised for a limit that is not a non-negative integer."""

    def __init__(self) -> None:
        super().__init__("invalid limit value")


@dataclass
class GameEntity:
    """Summary of one game."""

    id: int
    limit: int
    count: int
    width: int
    height: int
    rate: int

    def to_dict(self) -> dict[str, Any]:
        """The entity as a JSON-ready dictionary."""
        return asdict(self)


def parse_games_sorting(sorting: str) -> GamesSorting:
    """Parse a sorting label; an empty label selects the default."""
    if not sorting:
        return GAMES_SORTING_DEFAULT
    if sorting == _SORTING_LABEL_SMART:
        return GamesSorting.SMART
    if sorting == _SORTING_LABEL_RANDOM:
        return GamesSorting.RANDOM
    raise InvalidSortingError()


def parse_games_limit(label: str) -> Optional[int]:
    """Parse a limit; an empty label means no limit and yields None."""
    if not label:
        return None
    if not _INTEGER.fullmatch(label):
        raise InvalidLimitError()
    limit = int(label)
    if limit < 0:
        raise InvalidLimitError()
    return limit


def sort_game_entities(
    sorting: GamesSorting, entities: Sequence[GameEntity]
) -> list[GameEntity]:
    """Order entities.

    Smart sorting puts partly filled games first (fewest players first),
    then empty games (lowest rate first), then full games (smallest limit
    first). Random sorting shuffles the games.
    """
    result = list(entities)
    if sorting == GamesSorting.RANDOM:
        random.shuffle(result)
        return result
    if sorting != GamesSorting.SMART:
        return result

    empty = sorted((e for e in entities if e.count == 0), key=lambda e: e.rate)
    full = sorted((e for e in entities if e.count == e.limit), key=lambda e: e.limit)
    relevant = sorted(
        (e for e in entities if 0 < e.count < e.limit), key=lambda e: e.count
    )
    combined = relevant + empty + full
    size = min(len(combined), len(result))
    result[:size] = combined[:size]
    return result


def list_games(
    entities: Sequence[GameEntity],
    group_limit: int,
    sorting: GamesSorting = GAMES_SORTING_DEFAULT,
    limit: Optional[int] = None,
) -> dict[str, Any]:
    """Build the games listing response payload."""
    count = len(entities)
    if count == 0 or limit == 0:
        return {"games": [], "limit": group_limit, "count": count}

    ordered = sort_game_entities(sorting, entities)
    if limit is not None:
        ordered = ordered[:limit]

    return {
        "games": [entity.to_dict() for entity in ordered],
        "limit": group_limit,
        "count": count,
    }