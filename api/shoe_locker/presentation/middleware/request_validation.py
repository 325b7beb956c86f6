"""Request size limit middleware.

Kiosk requests are a handful of JSON fields; anything larger is rejected
before the body is read.
"""

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = structlog.get_logger()

MAX_REQUEST_SIZE = 64 * 1024  # 64 KB default


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose Content-Length exceeds the configured limit."""

    def __init__(self, app, max_size: int = MAX_REQUEST_SIZE) -> None:
        super().__init__(app)
        self._max_size = max_size

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                logger.warning(
                    "Invalid Content-Length header",
                    content_length=content_length,
                    path=request.url.path,
                )
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"message": "Invalid Content-Length header"},
                )

            if size > self._max_size:
                logger.warning(
                    "Request rejected: payload too large",
                    content_length=size,
                    max_size=self._max_size,
                    path=request.url.path,
                )
                return JSONResponse(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    content={
                        "message": f"Request body too large. Maximum size: {self._max_size} bytes"
                    },
                )

        return await call_next(request)
