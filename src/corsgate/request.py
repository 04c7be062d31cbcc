"""
Request view for corsgate.
Read-only projection of an ASGI HTTP scope.
"""

from collections.abc import Mapping
from functools import cached_property

from corsgate.types import Scope


class Request:
    """
    HTTP request view.

    Headers are looked up case-insensitively and may carry several values;
    ``get_header`` returns the first one, ``get_all`` every one of them in
    the order they arrived.
    """

    def __init__(self, scope: Scope) -> None:
        self._scope = scope

    @property
    def method(self) -> str:
        """HTTP method (GET, POST, etc.)."""
        return self._scope.get("method", "GET")

    @property
    def path(self) -> str:
        """Request path."""
        return self._scope.get("path", "/")

    @cached_property
    def headers(self) -> Mapping[str, list[str]]:
        """Request headers, lower-cased name to list of values."""
        headers: dict[str, list[str]] = {}
        raw_headers = self._scope.get("headers", [])

        for name, value in raw_headers:
            header_name = name.decode("latin-1").lower()
            header_value = value.decode("latin-1")
            headers.setdefault(header_name, []).append(header_value)

        return headers

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Get the first value of a header."""
        values = self.headers.get(name.lower())
        if not values:
            return default
        return values[0]

    def get_all(self, name: str) -> list[str]:
        """Get every value of a header."""
        return list(self.headers.get(name.lower(), []))

    @property
    def origin(self) -> str:
        """Origin header, empty when absent."""
        return self.get_header("origin", "") or ""

    @property
    def access_control_request_method(self) -> str:
        return self.get_header("access-control-request-method", "") or ""

    @property
    def access_control_request_headers(self) -> str:
        """All Access-Control-Request-Headers values joined with commas."""
        return ",".join(self.get_all("access-control-request-headers"))

    @property
    def is_preflight(self) -> bool:
        """OPTIONS request announcing the method of the request to follow."""
        return self.method == "OPTIONS" and bool(self.access_control_request_method)
