"""Per-request id, timing and response headers."""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from studyaid.core.logging import get_logger

logger = get_logger(__name__)

RESPONSE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs how long it took.

    OCR uploads can run for many seconds, so the upload size is logged next to
    the duration. The caller's X-Request-ID is echoed back when present.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = round((time.perf_counter() - started) * 1000)
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time-Ms"] = str(elapsed_ms)
        response.headers.update(RESPONSE_HEADERS)

        message = f"[{request_id}] {request.method} {request.url.path} {response.status_code} in {elapsed_ms}ms"
        size = request.headers.get("content-length")
        if size and request.method == "POST":
            message += f" ({size} bytes in)"
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, message)
        return response
