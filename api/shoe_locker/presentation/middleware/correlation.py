"""
Request correlation for kiosk and scheduler calls.

The ID comes from the X-Request-ID header when the caller sends one,
otherwise from the Lambda invocation (when running behind Mangum), and
is generated as a last resort. It is bound to every log line of the
request and echoed back in the response.
"""

from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...infrastructure.logging import set_correlation_id

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def _lambda_request_id(request: Request) -> str | None:
    # Mangum exposes the Lambda context in the ASGI scope
    context = request.scope.get("aws.context")
    return getattr(context, "aws_request_id", None) if context is not None else None


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tags each request with a correlation ID for log tracing."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = (
            request.headers.get(REQUEST_ID_HEADER)
            or _lambda_request_id(request)
            or str(uuid4())
        )
        set_correlation_id(correlation_id)

        with structlog.contextvars.bound_contextvars(route=f"{request.method} {request.url.path}"):
            logger.info("Request received")
            response = await call_next(request)
            logger.info("Request handled", status_code=response.status_code)

        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response
