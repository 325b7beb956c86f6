import structlog

from ...domain.entities import LockerSession
from ..dtos import StartWorkDTO, StartWorkResponseDTO
from ..ports.inbound import StartWorkUseCase
from ..ports.outbound import Clock, SessionRepository

logger = structlog.get_logger()


def _reading(value: int | float | str | None) -> str:
    return "" if value is None else str(value)


class StartWorkService(StartWorkUseCase):
    """Application service implementing the start work use case."""

    def __init__(
        self,
        repository: SessionRepository,
        clock: Clock,
        default_locker_id: str,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._default_locker_id = default_locker_id

    async def execute(self, dto: StartWorkDTO) -> StartWorkResponseDTO:
        session = LockerSession.start(
            user_email=dto.user_email,
            recommended_time_min=dto.recommended_time_min,
            now=self._clock.now(),
            locker_id=dto.locker_id or self._default_locker_id,
            shoe_type=dto.shoe_type,
            temperature=_reading(dto.temperature),
            humidity=_reading(dto.humidity),
        )

        sheets_update = await self._repository.append(session)

        logger.info(
            "Cleaning cycle started",
            log_id=session.log_id,
            locker_id=session.locker_id,
            user_email=session.user_email,
            finish_time=session.finish_time,
        )

        return StartWorkResponseDTO(
            message="Start work successful. Data saved to Google Sheet.",
            log_id=session.log_id,
            start_time=session.start_time,
            finish_time=session.finish_time,
            sheets_update=sheets_update,
        )
