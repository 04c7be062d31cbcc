"""
corsgate - sample application

A bare ASGI app wrapped in CORSMiddleware.
Run with: uv run uvicorn sample:app --reload
"""


import json
import logging

from corsgate import CORSMiddleware, json_error_handler
from corsgate.types import Receive, Scope, Send

# =============================================================================
# Application Setup
# =============================================================================

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
logger = logging.getLogger("corsgate.sample")


async def api(scope: Scope, receive: Receive, send: Send) -> None:
    """Answer every HTTP request with a small JSON document."""
    if scope["type"] != "http":
        return
    body = json.dumps({"message": "Hello, World!", "path": scope["path"]}).encode()
    await send({
        "type": "http.response.start",
        "status": 200,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({"type": "http.response.body", "body": body})


app = CORSMiddleware(
    api,
    allowed_origins=["http://localhost:3000", "https://*.example.com"],
    allowed_methods=["GET", "POST", "PUT", "DELETE"],
    allowed_headers=["Content-Type", "Authorization"],
    exposed_headers=["X-Request-Id"],
    allow_credentials=True,
    max_age=600,
    debug=True,
    error_handler=json_error_handler,
)


def main() -> None:
    import uvicorn

    logger.info("""
    corsgate sample
    ===============

    Try a preflight:
      curl -i -X OPTIONS http://127.0.0.1:8000/ \\
        -H 'Origin: http://localhost:3000' \\
        -H 'Access-Control-Request-Method: PUT'
    """)

    uvicorn.run(
        "sample:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
