from .locker_dto import (
    PickupShoesDTO,
    PickupShoesResponseDTO,
    StartWorkDTO,
    StartWorkResponseDTO,
    UpdateStatusResponseDTO,
)
from .notification_dto import SendEmailDTO, SendEmailResponseDTO

__all__ = [
    "PickupShoesDTO",
    "PickupShoesResponseDTO",
    "SendEmailDTO",
    "SendEmailResponseDTO",
    "StartWorkDTO",
    "StartWorkResponseDTO",
    "UpdateStatusResponseDTO",
]
