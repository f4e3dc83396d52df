"""Game events delivered to clients."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class EventType(IntEnum):
    """Kind of a game event."""

    ERROR = 0
    OBJECT_CREATE = 1
    OBJECT_DELETE = 2
    OBJECT_UPDATE = 3
    OBJECT_CHECKED = 4

    def __str__(self) -> str:
        return event_type_label(self)


_LABELS = {
    EventType.ERROR: "error",
    EventType.OBJECT_CREATE: "create",
    EventType.OBJECT_DELETE: "delete",
    EventType.OBJECT_UPDATE: "update",
    EventType.OBJECT_CHECKED: "checked",
}

_VALID_VALUES = {member.value for member in EventType}


def event_type_label(event_type: int) -> str:
    """Return the label of an event type, or ``"unknown"``."""
    if event_type in _VALID_VALUES:
        return _LABELS[EventType(event_type)]
    return "unknown"


def event_type_to_json(event_type: int) -> str:
    """Serialize an event type as a JSON string; invalid types become ``"unknown"``."""
    return f'"{event_type_label(event_type)}"'


def _dumps(value: Any) -> str:
    encoded = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return (
        encoded.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _encode_payload(value: Any) -> str:
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda item: str(item[0]))
        return "{" + ",".join(
            f"{_dumps(str(key))}:{_encode_payload(item)}" for key, item in items
        ) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode_payload(item) for item in value) + "]"
    return _dumps(value)


@dataclass
class Event:
    """An event with a type and an arbitrary payload."""

    type: int
    payload: Any = None

    def to_json(self) -> str:
        """Serialize as ``{"type":...,"payload":...}``."""
        return (
            f'{{"type":{event_type_to_json(self.type)},'
            f'"payload":{_encode_payload(self.payload)}}}'
        )