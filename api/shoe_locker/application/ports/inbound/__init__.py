from .locker_use_cases import (
    PickupShoesUseCase,
    SendEmailUseCase,
    StartWorkUseCase,
    UpdateStatusUseCase,
)

__all__ = [
    "PickupShoesUseCase",
    "SendEmailUseCase",
    "StartWorkUseCase",
    "UpdateStatusUseCase",
]
