from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.errors import register_exception_handlers
from .presentation.api.v1 import health, pickup_shoes, send_email, start_work, update_status
from .presentation.middleware import (
    CRON_SECRET_HEADER,
    CorrelationIdMiddleware,
    RequestSizeLimitMiddleware,
)

configure_logging(settings.service_name, debug=settings.debug)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        "Starting application",
        service=settings.service_name,
        sheets_configured=settings.sheets_configured,
        timezone=settings.timezone,
    )
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Smart Shoe Locker API",
    description="Start, track and close shoe cleaning cycles stored in Google Sheets",
    version="0.1.0",
    lifespan=lifespan,
)

# Middleware order matters - first added = last executed
app.add_middleware(RequestSizeLimitMiddleware, max_size=settings.max_request_size)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", CRON_SECRET_HEADER],
)
app.add_middleware(CorrelationIdMiddleware)  # Request tracing (runs first)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(start_work.router)
app.include_router(update_status.router)
app.include_router(pickup_shoes.router)
app.include_router(send_email.router)


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": "0.1.0",
        "docs": "/docs",
    }
