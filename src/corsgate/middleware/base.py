"""
Base middleware class for corsgate.
"""

from abc import ABC, abstractmethod

from corsgate.types import ASGIApp, Receive, Scope, Send


class Middleware(ABC):
    """
    Abstract base ASGI middleware.

    HTTP scopes go through ``process``; every other scope type
    (``websocket``, ``lifespan``) is handed to the wrapped app untouched.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI interface - called by the server."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        await self.process(scope, receive, send)

    @abstractmethod
    async def process(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Process the request. Must be implemented by subclasses."""
        ...
