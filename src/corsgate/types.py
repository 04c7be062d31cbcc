"""
Type definitions for corsgate.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from corsgate.cors import CORS
    from corsgate.request import Request
    from corsgate.response import ResponseWriter

# ASGI Types
Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

# Header Types
RawHeaders: TypeAlias = list[tuple[bytes, bytes]]

# Callback Types
OriginPredicate: TypeAlias = Callable[["Request", str], bool]
ErrorHandler: TypeAlias = Callable[
    ["ResponseWriter", "Request", "CORS", Exception], bool
]
