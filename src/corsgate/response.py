"""
Response writer for corsgate.

The CORS engine never talks to the transport directly. It queues headers,
and on rejection the error handler may set a status and write a body, in a
``ResponseWriter``. The middleware then either sends the writer as the whole
response or merges its headers into the wrapped application's response.
"""

import json
from typing import Any

from corsgate.types import Message, RawHeaders, Send

DEFAULT_STATUS_CODE: int = 200


class ResponseWriter:
    """
    Buffered response: ordered multi-value headers, a status code and a body.

    Header names keep the casing they were added with; lookups are
    case-insensitive. The status code can be written once; writing a body
    without a status implies ``200``.
    """

    def __init__(self) -> None:
        self._headers: list[tuple[str, str]] = []
        self.status_code: int | None = None
        self._body: list[bytes] = []

    @property
    def headers(self) -> list[tuple[str, str]]:
        """Queued headers in insertion order."""
        return list(self._headers)

    @property
    def body(self) -> bytes:
        return b"".join(self._body)

    @property
    def written(self) -> bool:
        """True once a status code or body has been written."""
        return self.status_code is not None

    def add_header(self, name: str, value: str) -> None:
        """Append a header value, keeping any existing ones."""
        self._headers.append((name, value))

    def set_header(self, name: str, value: str) -> None:
        """Replace every value of a header."""
        self.del_header(name)
        self._headers.append((name, value))

    def del_header(self, name: str) -> None:
        lowered = name.lower()
        self._headers = [(n, v) for n, v in self._headers if n.lower() != lowered]

    def get_all(self, name: str) -> list[str]:
        lowered = name.lower()
        return [v for n, v in self._headers if n.lower() == lowered]

    def get_header(self, name: str) -> str | None:
        """All values of a header joined with ``", "``, or None."""
        values = self.get_all(name)
        return ", ".join(values) if values else None

    def write_header(self, status_code: int) -> None:
        """Set the status code. Only the first call takes effect."""
        if self.status_code is None:
            self.status_code = status_code

    def write(self, data: bytes | str) -> int:
        """Append to the body, writing the default status first if needed."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.write_header(DEFAULT_STATUS_CODE)
        self._body.append(data)
        return len(data)

    def write_json(self, content: Any, status_code: int | None = None) -> None:
        """Write *content* as a JSON body."""
        if status_code is not None:
            self.write_header(status_code)
        self.set_header("Content-Type", "application/json; charset=utf-8")
        self.write(
            json.dumps(
                content,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
        )

    def raw_headers(self) -> RawHeaders:
        """Build header list for ASGI response."""
        return [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self._headers
        ]

    def wrap_send(self, send: Send) -> Send:
        """
        Wrap an ASGI ``send`` so the queued headers are appended to the
        downstream application's response start message.
        """
        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.extend(self.raw_headers())
                message["headers"] = headers
            await send(message)

        return send_with_headers

    async def __call__(self, send: Send) -> None:
        """Send the buffered response via ASGI."""
        await send({
            "type": "http.response.start",
            "status": self.status_code or DEFAULT_STATUS_CODE,
            "headers": self.raw_headers(),
        })

        await send({
            "type": "http.response.body",
            "body": self.body,
        })
