import structlog
from fastapi import APIRouter

from ....domain.exceptions import ShoeLockerError
from ....infrastructure.logging import Timer
from ..dependencies import get_session_repository

router = APIRouter(tags=["health"])
logger = structlog.get_logger()


@router.get("/health", summary="Health check")
async def health() -> dict:
    """Basic liveness check."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness() -> dict:
    """Readiness check - verifies the spreadsheet can be opened."""
    checks = {}

    try:
        with Timer() as t:
            repository = get_session_repository()
            title = await repository.healthcheck()
        checks["spreadsheet"] = {"status": "healthy", "title": title, "latency_ms": t.duration_ms}
    except ShoeLockerError as e:
        checks["spreadsheet"] = {"status": "unconfigured", "error": e.message}
    except Exception as e:
        logger.error("Spreadsheet health check failed", error=str(e))
        checks["spreadsheet"] = {"status": "unhealthy", "error": str(e)}

    all_healthy = all(c.get("status") == "healthy" for c in checks.values())

    return {
        "status": "ready" if all_healthy else "degraded",
        "checks": checks,
    }
