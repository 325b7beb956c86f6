"""Shared-secret check for the scheduled status sweep.

The scheduler calls update-status with the secret in the
``x-cron-secret`` header. Comparison is constant-time. Only the presence
of the settings is checked here; credentials are decoded after the
caller is authenticated.
"""

import secrets
from typing import Annotated

import structlog
from fastapi import Header

from ...config import settings
from ...domain.exceptions import ConfigurationError, UnauthorizedError

logger = structlog.get_logger()

CRON_SECRET_HEADER = "x-cron-secret"


async def require_cron_secret(
    x_cron_secret: Annotated[str | None, Header(alias=CRON_SECRET_HEADER)] = None,
) -> None:
    """Dependency that rejects calls without the configured cron secret."""
    expected = settings.cron_secret
    if not expected or not settings.sheets_configured:
        raise ConfigurationError("Configuration error: Missing required environment variables.")

    if not x_cron_secret or not secrets.compare_digest(
        x_cron_secret.encode("utf-8"), expected.encode("utf-8")
    ):
        logger.warning("Rejected scheduled call", header_present=bool(x_cron_secret))
        raise UnauthorizedError("Unauthorized")
