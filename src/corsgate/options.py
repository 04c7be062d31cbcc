"""
Configuration for the CORS engine.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import Any

from corsgate.exceptions import ConfigurationError
from corsgate.headers import is_token
from corsgate.types import ErrorHandler, OriginPredicate

DEFAULT_ALLOWED_METHODS: tuple[str, ...] = ("GET", "POST", "HEAD")
DEFAULT_ALLOWED_HEADERS: tuple[str, ...] = (
    "Origin",
    "Accept",
    "Content-Type",
    "X-Requested-With",
)
PERMISSIVE_METHODS: tuple[str, ...] = ("HEAD", "GET", "POST", "PUT", "PATCH", "DELETE")


def _as_tuple(name: str, value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        raise ConfigurationError(
            f"{name} must be a sequence of strings, not a single string"
        )
    items = tuple(value)
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError(f"{name} entries must be strings, got {item!r}")
    return items


@dataclass(frozen=True)
class Options:
    """
    CORS middleware options.

    ``None`` or an empty sequence means "use the default" for
    ``allowed_origins`` (every origin), ``allowed_methods`` and
    ``allowed_headers``. ``"*"`` in ``allowed_origins`` or
    ``allowed_headers`` allows everything.

    ``allow_origin_func(request, origin)``, when set, replaces the origin
    lists entirely. ``error_handler(writer, request, cors, error)`` decides
    what happens when a check fails and returns whether the wrapped
    application should still run.

    Entries of ``allowed_headers`` and ``exposed_headers`` must be HTTP
    header names (RFC 7230 tokens).

    ``debug=True`` without a ``logger`` sends messages at DEBUG level to the
    ``corsgate.cors`` logger. Nothing shows up unless the application
    configures logging for it, e.g. ``logging.basicConfig(level=logging.DEBUG)``.
    """

    allowed_origins: Iterable[str] | None = None
    allow_origin_func: OriginPredicate | None = None
    allowed_methods: Iterable[str] | None = None
    allowed_headers: Iterable[str] | None = None
    exposed_headers: Iterable[str] | None = None
    allow_credentials: bool = False
    max_age: int = 0
    options_passthrough: bool = False
    debug: bool = False
    logger: Any = None
    error_handler: ErrorHandler | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for name in (
            "allowed_origins",
            "allowed_methods",
            "allowed_headers",
            "exposed_headers",
        ):
            object.__setattr__(self, name, _as_tuple(name, getattr(self, name)))

        for name in ("allowed_headers", "exposed_headers"):
            for header in getattr(self, name) or ():
                if not is_token(header):
                    raise ConfigurationError(
                        f"{name} entries must be valid HTTP header names, got {header!r}"
                    )

        if isinstance(self.max_age, bool) or not isinstance(self.max_age, int):
            raise ConfigurationError(
                f"max_age must be an integer number of seconds, got {self.max_age!r}"
            )
        if self.allow_origin_func is not None and not callable(self.allow_origin_func):
            raise ConfigurationError("allow_origin_func must be callable")
        if self.error_handler is not None and not callable(self.error_handler):
            raise ConfigurationError("error_handler must be callable")

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "Options":
        """Build options from keyword arguments, rejecting unknown names."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigurationError(f"Unknown CORS option(s): {', '.join(unknown)}")
        return cls(**kwargs)

    @classmethod
    def permissive(cls, **overrides: Any) -> "Options":
        """
        Allow every origin, the common methods and any header.

        Credentials stay disabled; browsers refuse credentialed responses
        carrying ``Access-Control-Allow-Origin: *``.
        """
        defaults: dict[str, Any] = {
            "allowed_origins": ["*"],
            "allowed_methods": list(PERMISSIVE_METHODS),
            "allowed_headers": ["*"],
            "allow_credentials": False,
        }
        defaults.update(overrides)
        return cls.from_kwargs(**defaults)
