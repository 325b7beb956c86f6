"""
Structured logging configuration.

Centralized logging setup with:
- Structured JSON output
- Correlation ID tracking
- Timing helper for spreadsheet and email calls
- Email masking so user addresses stay out of log storage
"""

import logging
import sys
import time
from contextvars import ContextVar

import structlog

# Log fields that carry user email addresses
EMAIL_FIELDS = ("user_email", "recipient")

# Context variable for request correlation
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def configure_logging(service_name: str, debug: bool = False) -> None:
    """
    Configure structured logging for the service.

    Args:
        service_name: Name of the service for log context
        debug: Emit DEBUG records when True
    """
    # structlog.stdlib.LoggerFactory wraps stdlib logging, so it needs a handler
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            _add_correlation_id,
            _mask_email_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def _add_correlation_id(logger, method_name, event_dict):
    """Processor to add correlation ID if present."""
    cid = correlation_id.get()
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def _mask_email_fields(logger, method_name, event_dict):
    """Processor that masks email addresses in known fields."""
    for field in EMAIL_FIELDS:
        if field in event_dict:
            event_dict[field] = mask_email(event_dict[field])
    return event_dict


def set_correlation_id(cid: str) -> None:
    """Set correlation ID for current context."""
    correlation_id.set(cid)


class Timer:
    """
    Context manager for timing operations.

    Usage:
        with Timer() as t:
            worksheet.get_all_values()
        logger.info("Sheet read", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, rounded to 2 decimal places."""
        return round((self._end - self._start) * 1000, 2)


def mask_email(value: str | None) -> str:
    """
    Mask an email address for logging.

    Keeps the first character of the local part and the whole domain,
    e.g. ``alice@example.com`` becomes ``a***@example.com``.
    """
    if not value:
        return ""
    local, sep, domain = value.partition("@")
    if not sep:
        return local[:1] + "***"
    return f"{local[:1]}***@{domain}"
