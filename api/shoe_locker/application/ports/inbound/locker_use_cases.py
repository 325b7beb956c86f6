from abc import ABC, abstractmethod

from ...dtos import (
    PickupShoesDTO,
    PickupShoesResponseDTO,
    SendEmailDTO,
    SendEmailResponseDTO,
    StartWorkDTO,
    StartWorkResponseDTO,
    UpdateStatusResponseDTO,
)


class StartWorkUseCase(ABC):
    """Inbound port for starting a cleaning cycle."""

    @abstractmethod
    async def execute(self, dto: StartWorkDTO) -> StartWorkResponseDTO:
        pass


class UpdateStatusUseCase(ABC):
    """Inbound port for the scheduled status sweep."""

    @abstractmethod
    async def execute(self) -> UpdateStatusResponseDTO:
        pass


class PickupShoesUseCase(ABC):
    """Inbound port for recording a pickup."""

    @abstractmethod
    async def execute(self, dto: PickupShoesDTO) -> PickupShoesResponseDTO:
        pass


class SendEmailUseCase(ABC):
    """Inbound port for the near-completion notice."""

    @abstractmethod
    async def execute(self, dto: SendEmailDTO) -> SendEmailResponseDTO:
        pass
