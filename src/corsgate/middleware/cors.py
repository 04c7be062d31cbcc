"""
CORS (Cross-Origin Resource Sharing) middleware.
"""

from typing import Any

from corsgate.cors import CORS
from corsgate.middleware.base import Middleware
from corsgate.options import Options
from corsgate.request import Request
from corsgate.response import ResponseWriter
from corsgate.types import ASGIApp, Receive, Scope, Send


class CORSMiddleware(Middleware):
    """
    Cross-Origin Resource Sharing (CORS) middleware.

    Preflight requests (``OPTIONS`` with ``Access-Control-Request-Method``)
    are answered here with ``200`` and an empty body unless
    ``options_passthrough`` is set. Every other request reaches the wrapped
    app, with the CORS headers appended to its response.

    When the error handler stops a request, the status and body it wrote
    are sent instead (``200`` and empty if it wrote none). When it lets the
    request continue, only the queued headers are kept.

    Options are given either as an ``Options`` instance, as keyword
    arguments, or through an already compiled ``CORS`` policy::

        app = CORSMiddleware(app, allowed_origins=["https://*.example.com"])
    """

    def __init__(
        self,
        app: ASGIApp,
        options: Options | None = None,
        cors: CORS | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(app)
        if cors is not None:
            if options is not None or kwargs:
                raise TypeError("Pass either a CORS policy or options, not both")
            self.cors = cors
        else:
            self.cors = CORS(options, **kwargs)

    async def process(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope)
        writer = ResponseWriter()

        if request.is_preflight:
            self.cors.logf("Handler: Preflight request")
            proceed = self.cors.handle_preflight(writer, request)
            if proceed and self.cors.options_passthrough:
                await self.app(scope, receive, writer.wrap_send(send))
                return
            await writer(send)
            return

        self.cors.logf("Handler: Actual request")
        if self.cors.handle_actual_request(writer, request):
            await self.app(scope, receive, writer.wrap_send(send))
            return
        await writer(send)
