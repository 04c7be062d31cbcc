"""
Error handlers for rejected CORS checks.

An error handler is called as ``handler(writer, request, cors, error)`` and
returns True to let the wrapped application run, False to stop and send
whatever the handler wrote.
"""

from typing import TYPE_CHECKING

from corsgate.exceptions import (
    ActualMethodNotAllowedError,
    ActualRequestError,
    CORSError,
    PreflightNotAllowedMethodError,
    PreflightNotOptionMethodError,
)
from corsgate.request import Request
from corsgate.response import ResponseWriter

if TYPE_CHECKING:
    from corsgate.cors import CORS

_METHOD_ERRORS = (
    PreflightNotOptionMethodError,
    PreflightNotAllowedMethodError,
    ActualMethodNotAllowedError,
)


def default_error_handler(
    writer: ResponseWriter,
    request: Request,
    cors: "CORS",
    error: Exception,
) -> bool:
    """
    Log the error and write nothing.

    Preflight failures stop the chain; actual-request failures let the
    request through without CORS headers, since the browser enforces the
    policy on the response.
    """
    cors.logf("%s %s: %s", request.method, request.path, error)
    return isinstance(error, ActualRequestError)


def json_error_handler(
    writer: ResponseWriter,
    request: Request,
    cors: "CORS",
    error: Exception,
) -> bool:
    """
    Reject with a JSON body.

    Method errors get ``405 Method Not Allowed``, every other CORS error
    ``403 Forbidden``. Never exposes details of non-CORS errors.
    """
    if isinstance(error, CORSError):
        cors.logf("%s", error)
        status_code = 405 if isinstance(error, _METHOD_ERRORS) else 403
        writer.write_json(
            {"message": f"CORS error: {error.message}"},
            status_code=status_code,
        )
        return False

    cors.logf("Unexpected error during CORS handling: %r", error)
    writer.write_json(
        {"message": "CORS error: An unexpected error has occurred"},
        status_code=500,
    )
    return False
