"""
Origin, method and header matching.

All matcher state is compiled once at construction time and never mutated
afterwards, so a matcher can be shared by any number of concurrent requests.
"""

import re as _re
from collections.abc import Iterable

from corsgate.headers import canonical_header_key, is_token
from corsgate.options import DEFAULT_ALLOWED_HEADERS, DEFAULT_ALLOWED_METHODS
from corsgate.request import Request
from corsgate.types import OriginPredicate

WILDCARD = "*"


def compile_origin_pattern(pattern: str) -> _re.Pattern[str]:
    """
    Compile an origin containing one ``*`` into an anchored regex.

    The star stands for one or more characters of a single host label, so
    ``http://*.bar.com`` matches ``http://foo.bar.com`` but neither
    ``http://a.foo.bar.com`` nor ``http://.bar.com``.
    """
    prefix, suffix = pattern.split(WILDCARD, 1)
    return _re.compile(_re.escape(prefix) + r"[^./]+" + _re.escape(suffix))


class OriginMatcher:
    """
    Decides whether a request Origin is allowed.

    Resolution order: a dynamic predicate, when configured, is used
    exclusively. Otherwise ``allow_all`` short-circuits, then exact
    (case-sensitive) origins, then wildcard patterns in configured order.
    """

    def __init__(
        self,
        origins: Iterable[str] | None = None,
        predicate: OriginPredicate | None = None,
        allow_credentials: bool = False,
    ) -> None:
        self.predicate = predicate
        configured = tuple(origins or ())

        explicit = tuple(o for o in configured if o != WILDCARD)
        if predicate is not None:
            self.allow_all = False
        elif not configured:
            self.allow_all = True
        elif WILDCARD in configured:
            # Listing concrete origins next to "*" with credentials means the
            # concrete origins are the ones to echo.
            self.allow_all = not (allow_credentials and explicit)
        else:
            self.allow_all = False

        self.origins: tuple[str, ...] = tuple(o for o in explicit if WILDCARD not in o)
        self._exact: frozenset[str] = frozenset(self.origins)
        self.patterns: tuple[_re.Pattern[str], ...] = tuple(
            compile_origin_pattern(o) for o in explicit if WILDCARD in o
        )

    def is_allowed(self, request: Request, origin: str) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(request, origin))
        if self.allow_all:
            return True
        if origin in self._exact:
            return True
        for pattern in self.patterns:
            if pattern.fullmatch(origin):
                return True
        return False


class MethodMatcher:
    """Case-insensitive method allow-list. ``OPTIONS`` is always allowed."""

    def __init__(self, methods: Iterable[str] | None = None) -> None:
        if methods is None:
            methods = DEFAULT_ALLOWED_METHODS
        self.methods: tuple[str, ...] = tuple(m.upper() for m in methods)
        self._methods: frozenset[str] = frozenset(self.methods)

    def is_allowed(self, method: str) -> bool:
        method = method.upper()
        if not method:
            return False
        if method == "OPTIONS":
            return True
        return method in self._methods


class HeaderMatcher:
    """
    Case-insensitive header allow-list.

    Membership ignores case; the echoed list keeps the requested order in
    canonical form. ``Origin`` is always allowed.
    """

    def __init__(self, headers: Iterable[str] | None = None) -> None:
        configured = tuple(headers or ()) or DEFAULT_ALLOWED_HEADERS
        self.allow_all = WILDCARD in configured
        names = [canonical_header_key(h) for h in configured if h != WILDCARD]
        if "Origin" not in names:
            names.append("Origin")
        self.headers: tuple[str, ...] = tuple(names)
        self._headers: frozenset[str] = frozenset(h.lower() for h in names)

    def is_allowed(self, header: str) -> bool:
        if self.allow_all:
            return True
        return is_token(header) and header.lower() in self._headers

    def are_allowed(self, requested: list[str]) -> tuple[bool, list[str]]:
        """Return whether every requested header is allowed, and the echo list."""
        if all(self.is_allowed(h) for h in requested):
            return True, list(requested)
        return False, []
