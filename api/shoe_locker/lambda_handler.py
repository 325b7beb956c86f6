"""AWS Lambda entry point.

HTTP events from API Gateway or a function URL are passed to the FastAPI
app through Mangum. EventBridge scheduled events run the status sweep
directly, so the cron trigger needs no shared secret.
"""

import asyncio

import structlog
from mangum import Mangum

from .application.services import UpdateStatusService
from .domain.exceptions import ShoeLockerError
from .main import app
from .presentation.api.dependencies import get_clock, get_session_repository

logger = structlog.get_logger()

asgi_handler = Mangum(app, lifespan="off")


def is_scheduled_event(event: dict) -> bool:
    return event.get("source") == "aws.events" or event.get("detail-type") == "Scheduled Event"


async def run_status_sweep() -> dict:
    """Run update-status once, outside the HTTP stack."""
    service = UpdateStatusService(get_session_repository(), get_clock())
    result = await service.execute()
    return {"statusCode": 200, **result.model_dump()}


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for HTTP and scheduled events."""
    if not is_scheduled_event(event):
        return asgi_handler(event, context)

    logger.info("Scheduled status sweep", rule=event.get("resources"))
    try:
        return asyncio.run(run_status_sweep())
    except ShoeLockerError as e:
        logger.error("Scheduled status sweep failed", error=e.message)
        return {"statusCode": e.status_code, e.error_key: e.message}
