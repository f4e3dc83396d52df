"""HTTP responses served by the API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

CONTENT_TYPE_JSON = "application/json; charset=utf-8"
CONTENT_TYPE_TEXT = "text/plain; charset=utf-8"

_PING_BODY = b'{"pong":1}'
_NOT_FOUND_BODY = b'{"code":404,"text":"not found"}'
_WELCOME_MESSAGE = b"Welcome to Snake-Server!"


@dataclass
class Response:
    """Status, headers and body of an HTTP response."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def _compact_json(payload: Any) -> str:
    encoded = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return (
        encoded.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def encode_json(payload: Any) -> bytes:
    """Compact JSON followed by a newline, with HTML characters escaped."""
    return (_compact_json(payload) + "\n").encode("utf-8")


def json_response(status: int, payload: Any) -> Response:
    """A JSON response with the given status."""
    return Response(status, {"Content-Type": CONTENT_TYPE_JSON}, encode_json(payload))


def error_response(status: int, text: str) -> Response:
    """A JSON error response carrying the status code and a text."""
    return json_response(status, {"code": status, "text": text})


def ping_response() -> Response:
    """Response to a ping request."""
    return Response(200, {"Content-Type": CONTENT_TYPE_JSON}, _PING_BODY)


def not_found_response() -> Response:
    """Response for unknown routes."""
    return Response(404, {"Content-Type": CONTENT_TYPE_JSON}, _NOT_FOUND_BODY)


def welcome_response() -> Response:
    """Plain-text greeting."""
    return Response(200, {"Content-Type": CONTENT_TYPE_TEXT}, _WELCOME_MESSAGE)


def info_response(author: str, license: str, version: str, build: str) -> Response:
    """Server information as JSON."""
    body = _compact_json(
        {"author": author, "license": license, "version": version, "build": build}
    ).encode("utf-8")
    return Response(200, {"Content-Type": CONTENT_TYPE_JSON}, body)


def server_info_header(name: str, version: str, build: str) -> str:
    """Value of the ``Server`` header."""
    return f"{name}/{version} (build {build})"