import json

import pytest

from snakeserver.dot import Dot
from snakeserver.events import Event, EventType, event_type_label, event_type_to_json


@pytest.mark.parametrize(
    "event_type, label",
    [
        (EventType.ERROR, "error"),
        (EventType.OBJECT_CREATE, "create"),
        (EventType.OBJECT_DELETE, "delete"),
        (EventType.OBJECT_UPDATE, "update"),
        (EventType.OBJECT_CHECKED, "checked"),
    ],
)
def test_labels_and_json(event_type, label):
    assert event_type_label(event_type) == label
    assert str(event_type) == label
    assert event_type_to_json(event_type) == '"' + label + '"'


@pytest.mark.parametrize("value", [5, 21, 255])
def test_unknown_event_type(value):
    assert event_type_label(value) == "unknown"
    assert event_type_to_json(value) == '"unknown"'


def test_event_with_dot_payload():
    event = Event(EventType.OBJECT_CREATE, Dot(1, 2))
    assert event.to_json() == '{"type":"create","payload":[1,2]}'


def test_event_with_plain_payload_round_trips():
    payload = {"id": 7, "dots": [Dot(3, 4), Dot(5, 6)], "name": "snake"}
    decoded = json.loads(Event(EventType.OBJECT_UPDATE, payload).to_json())
    assert decoded == {
        "type": "update",
        "payload": {"id": 7, "dots": [[3, 4], [5, 6]], "name": "snake"},
    }


def test_event_with_none_payload():
    decoded = json.loads(Event(EventType.ERROR).to_json())
    assert decoded == {"type": "error", "payload": None}


def test_event_string_payload_escapes_html():
    encoded = Event(EventType.ERROR, "<b>").to_json()
    assert "<" not in encoded
    assert json.loads(encoded)["payload"] == "<b>"


def test_event_with_unknown_type_round_trips():
    decoded = json.loads(Event(42, [1, 2]).to_json())
    assert decoded == {"type": "unknown", "payload": [1, 2]}