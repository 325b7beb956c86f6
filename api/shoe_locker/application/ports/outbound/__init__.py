from .clock import Clock
from .email_gateway import DeliveryResult, EmailGateway
from .session_repository import SessionRepository

__all__ = [
    "Clock",
    "DeliveryResult",
    "EmailGateway",
    "SessionRepository",
]
