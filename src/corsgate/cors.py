"""
CORS decision engine.

Implements the two request paths of the CORS protocol:

* preflight: an ``OPTIONS`` request carrying ``Access-Control-Request-Method``
  asks whether the request that follows is permitted;
* actual request: any other request, whose response gets the headers that
  let the browser expose it to the calling page.

Both paths only write headers into a ``ResponseWriter`` and report whether
the wrapped application should run. Transport is left to the caller.
"""

import logging
from typing import TYPE_CHECKING, Any

from corsgate.exceptions import (
    ActualMethodNotAllowedError,
    ActualMissingOriginError,
    ActualOriginNotAllowedError,
    PreflightEmptyOriginError,
    PreflightNotAllowedMethodError,
    PreflightNotHeadersAllowedError,
    PreflightNotOptionMethodError,
    PreflightNotOriginAllowedError,
)
from corsgate.handlers import default_error_handler
from corsgate.headers import canonical_header_key, parse_header_list
from corsgate.matching import HeaderMatcher, MethodMatcher, OriginMatcher
from corsgate.options import Options
from corsgate.request import Request
from corsgate.response import ResponseWriter
from corsgate.types import ASGIApp, ErrorHandler

if TYPE_CHECKING:
    from corsgate.middleware.cors import CORSMiddleware

PREFLIGHT_VARY = (
    "Origin, Access-Control-Request-Method, Access-Control-Request-Headers"
)


class CORS:
    """
    Compiled CORS policy.

    Built once from ``Options``; holds no per-request state, so a single
    instance can serve concurrent requests.
    """

    def __init__(self, options: Options | None = None, **kwargs: Any) -> None:
        if options is None:
            options = Options.from_kwargs(**kwargs)
        elif kwargs:
            raise TypeError("Pass either an Options instance or keyword options, not both")
        self.options = options

        self.log: Any = options.logger
        if self.log is None and options.debug:
            self.log = logging.getLogger("corsgate.cors")

        self.origins = OriginMatcher(
            options.allowed_origins,
            options.allow_origin_func,
            options.allow_credentials,
        )
        self.methods = MethodMatcher(options.allowed_methods or None)
        self.headers = HeaderMatcher(options.allowed_headers)
        self.exposed_headers: tuple[str, ...] = tuple(
            canonical_header_key(h) for h in options.exposed_headers or ()
        )
        self.allow_credentials = options.allow_credentials
        self.max_age = options.max_age
        self.options_passthrough = options.options_passthrough
        self.error_handler: ErrorHandler = options.error_handler or default_error_handler

    def logf(self, msg: str, *args: Any) -> None:
        """Log at debug level when a logger is configured."""
        if self.log is not None:
            self.log.debug(msg, *args)

    def is_origin_allowed(self, request: Request, origin: str) -> bool:
        return self.origins.is_allowed(request, origin)

    def is_method_allowed(self, method: str) -> bool:
        return self.methods.is_allowed(method)

    def are_headers_allowed(self, requested: list[str]) -> tuple[bool, list[str]]:
        return self.headers.are_allowed(requested)

    def _allow_origin_value(self, origin: str) -> str:
        return "*" if self.origins.allow_all else origin

    def handle_preflight(self, writer: ResponseWriter, request: Request) -> bool:
        """
        Validate a preflight request and write its headers.

        Returns whether processing should continue; on rejection that is the
        error handler's decision.
        """
        origin = request.origin

        if request.method != "OPTIONS":
            return self.error_handler(
                writer, request, self, PreflightNotOptionMethodError(request.method)
            )

        # Caches must key preflight responses on all three request headers,
        # whatever the outcome.
        writer.add_header("Vary", PREFLIGHT_VARY)

        if not origin:
            return self.error_handler(writer, request, self, PreflightEmptyOriginError())

        if not self.is_origin_allowed(request, origin):
            return self.error_handler(
                writer, request, self, PreflightNotOriginAllowedError(origin)
            )

        request_method = request.access_control_request_method
        if not self.is_method_allowed(request_method):
            return self.error_handler(
                writer, request, self, PreflightNotAllowedMethodError(request_method)
            )

        request_headers = parse_header_list(request.access_control_request_headers)
        allowed, echoed = self.are_headers_allowed(request_headers)
        if not allowed:
            return self.error_handler(
                writer, request, self, PreflightNotHeadersAllowedError(request_headers)
            )

        writer.add_header("Access-Control-Allow-Origin", self._allow_origin_value(origin))
        # Only the requested method is echoed back.
        writer.add_header("Access-Control-Allow-Methods", request_method.upper())
        if echoed:
            writer.add_header("Access-Control-Allow-Headers", ", ".join(echoed))
        if self.allow_credentials:
            writer.add_header("Access-Control-Allow-Credentials", "true")
        if self.max_age > 0:
            writer.add_header("Access-Control-Max-Age", str(self.max_age))

        self.logf("Preflight response headers: %s", writer.headers)
        return True

    def handle_actual_request(self, writer: ResponseWriter, request: Request) -> bool:
        """
        Write the CORS headers of an actual request.

        Rejections only withhold the headers: with the default error handler
        the wrapped application still runs.
        """
        origin = request.origin

        writer.add_header("Vary", "Origin")

        if not origin:
            return self.error_handler(writer, request, self, ActualMissingOriginError())

        if not self.is_origin_allowed(request, origin):
            return self.error_handler(
                writer, request, self, ActualOriginNotAllowedError(origin)
            )

        if not self.is_method_allowed(request.method):
            return self.error_handler(
                writer, request, self, ActualMethodNotAllowedError(request.method)
            )

        writer.add_header("Access-Control-Allow-Origin", self._allow_origin_value(origin))
        if self.allow_credentials:
            writer.add_header("Access-Control-Allow-Credentials", "true")
        if self.exposed_headers:
            writer.add_header(
                "Access-Control-Expose-Headers", ", ".join(self.exposed_headers)
            )

        self.logf("Actual response added headers: %s", writer.headers)
        return True

    def wrap(self, app: ASGIApp) -> "CORSMiddleware":
        """Wrap an ASGI app with this policy."""
        from corsgate.middleware.cors import CORSMiddleware

        return CORSMiddleware(app, cors=self)
