"""Exception handlers mapping domain and upstream errors to JSON responses."""

import structlog
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException

from ...domain.exceptions import ShoeLockerError

logger = structlog.get_logger()

# SDK errors surfaced as 500 with the upstream message
UPSTREAM_ERRORS: tuple[type[Exception], ...] = (
    GSpreadException,
    GoogleAuthError,
    BotoCoreError,
    ClientError,
)


def describe_validation_errors(errors: list[dict]) -> str:
    """Summarize pydantic errors as one human-readable message."""

    def field_name(error: dict) -> str:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        return ".".join(loc) or "body"

    missing = [field_name(e) for e in errors if e.get("type") == "missing"]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    invalid = list(dict.fromkeys(field_name(e) for e in errors))
    return f"Invalid {', '.join(invalid)}"


async def shoe_locker_error_handler(request: Request, exc: ShoeLockerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request failed", error=exc.message, error_type=type(exc).__name__)
    else:
        logger.info("Request rejected", error=exc.message, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={exc.error_key: exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": describe_validation_errors(errors), "errors": errors},
    )


async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Upstream call failed",
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShoeLockerError, shoe_locker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    for error_type in UPSTREAM_ERRORS:
        app.add_exception_handler(error_type, upstream_error_handler)
