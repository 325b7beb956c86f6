import structlog

from ...domain.exceptions import NoActiveSessionError
from ..dtos import PickupShoesDTO, PickupShoesResponseDTO
from ..ports.inbound import PickupShoesUseCase
from ..ports.outbound import Clock, SessionRepository

logger = structlog.get_logger()


class PickupShoesService(PickupShoesUseCase):
    """Records a pickup once the user's latest cycle has finished."""

    def __init__(self, repository: SessionRepository, clock: Clock) -> None:
        self._repository = repository
        self._clock = clock

    async def execute(self, dto: PickupShoesDTO) -> PickupShoesResponseDTO:
        sessions = await self._repository.list_sessions()

        active = [s for s in sessions if s.user_email == dto.user_email and s.is_active]
        if not active:
            raise NoActiveSessionError("No active shoe-cleaning task found for this user.")

        # Sheet order is append order, so the last match is the latest cycle.
        latest = active[-1]
        now = self._clock.now()

        if not latest.is_finished(now):
            return PickupShoesResponseDTO(
                message=(
                    "The shoe-drying process is still running. "
                    f"Please come back after {latest.finish_time}."
                ),
                finish_time=latest.finish_time,
                status=latest.status,
            )

        latest.mark_picked_up(now)
        await self._repository.record_pickup(latest)

        logger.info(
            "Pickup recorded",
            log_id=latest.log_id,
            user_email=latest.user_email,
            row_number=latest.row_number,
        )
        return PickupShoesResponseDTO(
            message="Pickup recorded successfully.",
            pickup_time=latest.pickup_time,
            status=latest.status,
        )
