"""
Request correlation middleware.
"""

import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from blog_api.config import get_settings
from blog_api.logging_config import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


def resolve_request_id(incoming: Optional[str]) -> str:
    """Reuse a client-supplied id when it is sane, otherwise mint a UUID."""
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH and incoming.isprintable():
        return incoming
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id, expose it on ``request.state`` and the
    response header, and log the request outcome with its duration.
    """

    def __init__(self, app: ASGIApp, slow_request_ms: Optional[int] = None):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms or get_settings().slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        response.headers[REQUEST_ID_HEADER] = request_id

        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }
        if duration_ms > self.slow_request_ms:
            logger.warning("Slow request", extra=fields)
        else:
            logger.debug("Request completed", extra=fields)
        return response
