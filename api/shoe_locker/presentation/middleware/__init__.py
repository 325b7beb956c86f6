from .correlation import CorrelationIdMiddleware
from .cron_auth import CRON_SECRET_HEADER, require_cron_secret
from .request_validation import RequestSizeLimitMiddleware

__all__ = [
    "CRON_SECRET_HEADER",
    "CorrelationIdMiddleware",
    "RequestSizeLimitMiddleware",
    "require_cron_secret",
]
