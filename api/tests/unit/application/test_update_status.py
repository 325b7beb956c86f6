import pytest

from shoe_locker.application.services import UpdateStatusService
from shoe_locker.domain.exceptions import EmptyDatabaseError
from shoe_locker.domain.value_objects import SessionStatus


class TestUpdateStatusService:
    @pytest.fixture
    def service(self, mock_repository, clock):
        return UpdateStatusService(mock_repository, clock)

    @pytest.mark.asyncio
    async def test_empty_sheet_has_nothing_to_process(self, service, mock_repository):
        mock_repository.list_sessions.side_effect = EmptyDatabaseError("Database is empty.")

        result = await service.execute()

        assert result.message == "No rows to process."
        assert result.updated_count == 0
        mock_repository.mark_ready.assert_not_called()

    @pytest.mark.asyncio
    async def test_header_only_sheet_has_nothing_to_process(self, service, mock_repository):
        mock_repository.list_sessions.return_value = []

        result = await service.execute()

        assert result.message == "No rows to process."

    @pytest.mark.asyncio
    async def test_flags_only_elapsed_sessions(self, service, mock_repository, make_session):
        elapsed = make_session(minutes_left=-1, row_number=2)
        running = make_session(minutes_left=5, row_number=3)
        mock_repository.list_sessions.return_value = [elapsed, running]

        result = await service.execute()

        assert result.message == "Status updated."
        assert result.updated_count == 1
        flagged = mock_repository.mark_ready.call_args[0][0]
        assert flagged == [elapsed]
        assert elapsed.status == SessionStatus.READY_FOR_PICKUP
        assert running.status == SessionStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_skips_picked_up_and_already_ready(self, service, mock_repository, make_session):
        mock_repository.list_sessions.return_value = [
            make_session(minutes_left=-30, status=SessionStatus.PICKED_UP, row_number=2),
            make_session(minutes_left=-30, status=SessionStatus.READY_FOR_PICKUP, row_number=3),
        ]

        result = await service.execute()

        assert result.message == "All rows are up-to-date. No changes made."
        assert result.updated_count == 0
        mock_repository.mark_ready.assert_not_called()

    @pytest.mark.asyncio
    async def test_skips_missing_and_unreadable_deadlines(
        self, service, mock_repository, make_session
    ):
        blank = make_session(minutes_left=-1, row_number=2)
        blank.finish_time = ""
        garbled = make_session(minutes_left=-1, row_number=3)
        garbled.finish_time = "soon"
        due = make_session(minutes_left=-1, row_number=4)
        mock_repository.list_sessions.return_value = [blank, garbled, due]

        result = await service.execute()

        assert result.updated_count == 1
        assert mock_repository.mark_ready.call_args[0][0] == [due]

    @pytest.mark.asyncio
    async def test_updates_are_batched(self, service, mock_repository, make_session):
        mock_repository.list_sessions.return_value = [
            make_session(minutes_left=-i, row_number=i + 1) for i in range(1, 6)
        ]

        result = await service.execute()

        assert result.updated_count == 5
        mock_repository.mark_ready.assert_called_once()
