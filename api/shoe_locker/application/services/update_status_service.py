import structlog

from ...domain.exceptions import EmptyDatabaseError
from ..dtos import UpdateStatusResponseDTO
from ..ports.inbound import UpdateStatusUseCase
from ..ports.outbound import Clock, SessionRepository

logger = structlog.get_logger()


class UpdateStatusService(UpdateStatusUseCase):
    """Flags every elapsed session as ready for pickup."""

    def __init__(self, repository: SessionRepository, clock: Clock) -> None:
        self._repository = repository
        self._clock = clock

    async def execute(self) -> UpdateStatusResponseDTO:
        try:
            sessions = await self._repository.list_sessions()
        except EmptyDatabaseError:
            sessions = []

        if not sessions:
            return UpdateStatusResponseDTO(message="No rows to process.")

        now = self._clock.now()
        due = []
        for session in sessions:
            if session.finish_time and session.deadline(now) is None:
                logger.warning(
                    "Skipping row with unreadable finish_time",
                    row_number=session.row_number,
                    finish_time=session.finish_time,
                )
                continue
            if session.needs_ready_flag(now):
                session.mark_ready()
                due.append(session)

        if not due:
            return UpdateStatusResponseDTO(message="All rows are up-to-date. No changes made.")

        await self._repository.mark_ready(due)

        logger.info("Sessions flagged ready for pickup", count=len(due))
        return UpdateStatusResponseDTO(message="Status updated.", updated_count=len(due))
