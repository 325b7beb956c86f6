from .inbound import (
    PickupShoesUseCase,
    SendEmailUseCase,
    StartWorkUseCase,
    UpdateStatusUseCase,
)
from .outbound import Clock, DeliveryResult, EmailGateway, SessionRepository

__all__ = [
    "StartWorkUseCase",
    "UpdateStatusUseCase",
    "PickupShoesUseCase",
    "SendEmailUseCase",
    "Clock",
    "DeliveryResult",
    "EmailGateway",
    "SessionRepository",
]
