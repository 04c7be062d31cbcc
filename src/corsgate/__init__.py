"""
corsgate - CORS policy enforcement for ASGI applications

Decides whether a browser cross-origin request is permitted and writes the
response headers that grant or deny the calling page access.
"""

from corsgate.cors import CORS
from corsgate.exceptions import (
    ActualMethodNotAllowedError,
    ActualMissingOriginError,
    ActualOriginNotAllowedError,
    ActualRequestError,
    ConfigurationError,
    CORSError,
    ErrorKind,
    Phase,
    PreflightEmptyOriginError,
    PreflightError,
    PreflightNotAllowedMethodError,
    PreflightNotHeadersAllowedError,
    PreflightNotOptionMethodError,
    PreflightNotOriginAllowedError,
    is_cors_error,
)
from corsgate.handlers import default_error_handler, json_error_handler
from corsgate.middleware import CORSMiddleware, Middleware
from corsgate.options import Options
from corsgate.request import Request
from corsgate.response import ResponseWriter

__version__ = "0.1.0"
__all__ = [
    "CORS",
    "CORSMiddleware",
    "Middleware",
    "Options",
    "Request",
    "ResponseWriter",
    "default_error_handler",
    "json_error_handler",
    "is_cors_error",
    "ConfigurationError",
    "CORSError",
    "PreflightError",
    "ActualRequestError",
    "ErrorKind",
    "Phase",
    "PreflightNotOptionMethodError",
    "PreflightEmptyOriginError",
    "PreflightNotOriginAllowedError",
    "PreflightNotAllowedMethodError",
    "PreflightNotHeadersAllowedError",
    "ActualMissingOriginError",
    "ActualOriginNotAllowedError",
    "ActualMethodNotAllowedError",
]
