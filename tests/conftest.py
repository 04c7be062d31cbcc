"""
Helpers for building ASGI scope / receive / send in tests.
"""

from collections.abc import Callable, Awaitable
from typing import Any


def make_scope(
    method: str = "GET",
    path: str = "/",
    headers: dict[str, str] | list[tuple[str, str]] | None = None,
    scope_type: str = "http",
    extras: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a minimal ASGI scope dict. Pass a list of pairs for repeated headers."""
    items = headers.items() if isinstance(headers, dict) else (headers or [])
    raw_headers: list[tuple[bytes, bytes]] = []
    for name, value in items:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    scope: dict[str, Any] = {
        "type": scope_type,
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": raw_headers,
        "client": ("127.0.0.1", 12345),
        "scheme": "http",
    }
    if extras:
        scope.update(extras)
    return scope


def make_receive(body: bytes = b"") -> Callable[[], Awaitable[dict[str, Any]]]:
    """Create a simple ASGI receive callable that yields one body chunk."""
    called = False

    async def receive() -> dict[str, Any]:
        nonlocal called
        if not called:
            called = True
            return {"type": "http.request", "body": body, "more_body": False}
        return {"type": "http.disconnect"}

    return receive


class ResponseCapture:
    """
    Captures ASGI send() messages for assertions.

    Repeated headers are joined with ``", "`` in ``headers``.
    """

    def __init__(self) -> None:
        self.messages: list[dict[str, Any]] = []
        self.status: int = 0
        self.headers: dict[str, str] = {}
        self.raw_headers: list[tuple[str, str]] = []
        self.body: bytes = b""

    async def __call__(self, message: dict[str, Any]) -> None:
        self.messages.append(message)
        if message["type"] == "http.response.start":
            self.status = message.get("status", 0)
            for name, value in message.get("headers", []):
                key = name.decode("latin-1").lower()
                val = value.decode("latin-1")
                self.raw_headers.append((key, val))
                if key in self.headers:
                    self.headers[key] = f"{self.headers[key]}, {val}"
                else:
                    self.headers[key] = val
        elif message["type"] == "http.response.body":
            self.body += message.get("body", b"")


async def ok_app(scope, receive, send):
    """Downstream app that always answers 200 ``bar``."""
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"bar"})


CORS_HEADERS = (
    "vary",
    "access-control-allow-origin",
    "access-control-allow-methods",
    "access-control-allow-headers",
    "access-control-allow-credentials",
    "access-control-max-age",
    "access-control-expose-headers",
)


def cors_headers(headers: dict[str, str]) -> dict[str, str]:
    """Only the CORS related entries of a lower-cased header dict."""
    return {k: v for k, v in headers.items() if k in CORS_HEADERS}
