"""
corsgate exceptions.

CORS errors are never raised by the engine. They are handed, as values, to
the configured error handler, which decides what to write and whether the
wrapped application still runs. Each error is classified along two axes:
its ``phase`` (preflight or actual request) and its ``kind``.
"""

from enum import Enum
from typing import Any


class Phase(str, Enum):
    """Protocol phase in which a CORS check failed."""

    PREFLIGHT = "preflight"
    ACTUAL = "actual"


class ErrorKind(str, Enum):
    """Reason a CORS check failed."""

    NOT_OPTION_METHOD = "not_option_method"
    EMPTY_ORIGIN = "empty_origin"
    MISSING_ORIGIN = "missing_origin"
    ORIGIN_NOT_ALLOWED = "origin_not_allowed"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    HEADERS_NOT_ALLOWED = "headers_not_allowed"


class CorsgateException(Exception):
    """Base exception for all corsgate errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(CorsgateException, ValueError):
    """Invalid middleware options."""
    pass


class CORSError(CorsgateException):
    """
    Base class for CORS policy violations.

    Subclasses set ``phase`` and ``kind``. Two errors are equal when they
    are of the same class and carry the same payload.
    """

    phase: Phase
    kind: ErrorKind

    def _payload(self) -> tuple[Any, ...]:
        return ()

    @property
    def is_preflight(self) -> bool:
        return self.phase is Phase.PREFLIGHT

    @property
    def is_actual_request(self) -> bool:
        return self.phase is Phase.ACTUAL

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        # pyrefly: ignore [missing-attribute]
        return self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._payload()))})"


class PreflightError(CORSError):
    """A preflight (OPTIONS) request was rejected."""

    phase = Phase.PREFLIGHT


class ActualRequestError(CORSError):
    """An actual request got no CORS headers."""

    phase = Phase.ACTUAL


# ---------------------------------------------------------------------------
# Preflight errors
# ---------------------------------------------------------------------------


class PreflightNotOptionMethodError(PreflightError):
    """Preflight handling was invoked for a non-OPTIONS request."""

    kind = ErrorKind.NOT_OPTION_METHOD

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Preflight aborted: {method}!=OPTIONS")

    def _payload(self) -> tuple[Any, ...]:
        return (self.method,)


class PreflightEmptyOriginError(PreflightError):
    """Preflight request carried no Origin header."""

    kind = ErrorKind.EMPTY_ORIGIN

    def __init__(self) -> None:
        super().__init__("Preflight aborted: empty origin")


class PreflightNotOriginAllowedError(PreflightError):
    """Preflight origin is not in the allow-list."""

    kind = ErrorKind.ORIGIN_NOT_ALLOWED

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__(f"Preflight aborted: origin '{origin}' not allowed")

    def _payload(self) -> tuple[Any, ...]:
        return (self.origin,)


class PreflightNotAllowedMethodError(PreflightError):
    """Access-Control-Request-Method is not in the allow-list."""

    kind = ErrorKind.METHOD_NOT_ALLOWED

    def __init__(self, request_method: str) -> None:
        self.request_method = request_method
        super().__init__(
            f"Preflight aborted: method '{request_method}' not allowed"
        )

    def _payload(self) -> tuple[Any, ...]:
        return (self.request_method,)


class PreflightNotHeadersAllowedError(PreflightError):
    """At least one Access-Control-Request-Headers entry is not allowed."""

    kind = ErrorKind.HEADERS_NOT_ALLOWED

    def __init__(self, request_headers: list[str]) -> None:
        self.request_headers = list(request_headers)
        super().__init__(
            f"Preflight aborted: headers "
            f"'{', '.join(self.request_headers)}' not allowed"
        )

    def _payload(self) -> tuple[Any, ...]:
        return tuple(self.request_headers)


# ---------------------------------------------------------------------------
# Actual request errors
# ---------------------------------------------------------------------------


class ActualMissingOriginError(ActualRequestError):
    """Request has no Origin header (same-origin or non-browser client)."""

    kind = ErrorKind.MISSING_ORIGIN

    def __init__(self) -> None:
        super().__init__("Actual request no headers added: missing origin")


class ActualOriginNotAllowedError(ActualRequestError):
    kind = ErrorKind.ORIGIN_NOT_ALLOWED

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__(
            f"Actual request no headers added: origin '{origin}' not allowed"
        )

    def _payload(self) -> tuple[Any, ...]:
        return (self.origin,)


class ActualMethodNotAllowedError(ActualRequestError):
    kind = ErrorKind.METHOD_NOT_ALLOWED

    def __init__(self, request_method: str) -> None:
        self.request_method = request_method
        super().__init__(
            f"Actual request no headers added: "
            f"method '{request_method}' not allowed"
        )

    def _payload(self) -> tuple[Any, ...]:
        return (self.request_method,)


def is_cors_error(error: BaseException) -> bool:
    """True if *error* is a CORS policy violation rather than a generic error."""
    return isinstance(error, CORSError)
