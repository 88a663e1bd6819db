"""Request body size limit middleware.

Rejects requests whose declared Content-Length exceeds max_upload_size with
413 and the same JSON error shape as the exception handlers. Raw ASGI.
"""

import json
from typing import Callable

from app.middleware.request_id import get_header


async def _send_413(send: Callable, max_bytes: int, actual: int) -> None:
    body = json.dumps(
        {
            "error": "PAYLOAD_TOO_LARGE",
            "message": f"Request body must be at most {max_bytes} bytes",
            "details": {"max_bytes": max_bytes, "content_length": actual},
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose Content-Length exceeds max_bytes."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] == "http":
            declared = get_header(scope, "content-length")
            if declared and declared.isdigit() and int(declared) > max_bytes:
                await _send_413(send, max_bytes, int(declared))
                return
        await app(scope, receive, send)

    return asgi_app
