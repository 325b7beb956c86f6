import pytest
from pydantic import ValidationError

from shoe_locker.application.dtos import StartWorkDTO
from shoe_locker.application.services import StartWorkService
from shoe_locker.domain.entities import LockerSession
from shoe_locker.domain.value_objects import SessionStatus


class TestStartWorkService:
    @pytest.fixture
    def service(self, mock_repository, clock):
        mock_repository.append.return_value = {"updates": {"updatedRange": "Sheet1!A5:K5"}}
        return StartWorkService(mock_repository, clock, default_locker_id="L001")

    @pytest.mark.asyncio
    async def test_execute_appends_new_session(self, service, mock_repository):
        result = await service.execute(
            StartWorkDTO(user_email="alice@example.com", recommended_time_min=30)
        )

        mock_repository.append.assert_called_once()
        saved = mock_repository.append.call_args[0][0]
        assert isinstance(saved, LockerSession)
        assert saved.user_email == "alice@example.com"
        assert saved.locker_id == "L001"
        assert saved.status == SessionStatus.IN_PROGRESS
        assert saved.log_id == result.log_id

    @pytest.mark.asyncio
    async def test_execute_returns_times_and_sheet_summary(self, service):
        result = await service.execute(
            StartWorkDTO(user_email="alice@example.com", recommended_time_min=90)
        )

        assert result.start_time == "2025-03-01T12:00:00+07:00"
        assert result.finish_time == "2025-03-01T13:30:00+07:00"
        assert result.sheets_update["updates"]["updatedRange"] == "Sheet1!A5:K5"
        assert "Google Sheet" in result.message

    @pytest.mark.asyncio
    async def test_execute_keeps_optional_readings(self, service, mock_repository):
        await service.execute(
            StartWorkDTO(
                user_email="alice@example.com",
                recommended_time_min=15,
                locker_id="L007",
                shoe_type="leather",
                temperature=32.5,
                humidity="55",
            )
        )

        saved = mock_repository.append.call_args[0][0]
        assert saved.locker_id == "L007"
        assert saved.shoe_type == "leather"
        assert saved.temperature == "32.5"
        assert saved.humidity == "55"

    @pytest.mark.asyncio
    async def test_integer_readings_are_not_widened(self, service, mock_repository):
        await service.execute(
            StartWorkDTO(
                user_email="alice@example.com",
                recommended_time_min=15,
                temperature=25,
                humidity=60,
            )
        )

        saved = mock_repository.append.call_args[0][0]
        assert saved.temperature == "25"
        assert saved.humidity == "60"

    @pytest.mark.asyncio
    async def test_multi_day_cycle_is_accepted(self, service):
        result = await service.execute(
            StartWorkDTO(user_email="alice@example.com", recommended_time_min=1500)
        )

        assert result.finish_time == "2025-03-02T13:00:00+07:00"

    @pytest.mark.asyncio
    async def test_repository_error_propagates(self, service, mock_repository):
        mock_repository.append.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(RuntimeError, match="quota"):
            await service.execute(
                StartWorkDTO(user_email="alice@example.com", recommended_time_min=30)
            )


class TestStartWorkDTO:
    def test_numeric_string_duration_is_accepted(self):
        dto = StartWorkDTO(user_email=" alice@example.com ", recommended_time_min="25")

        assert dto.recommended_time_min == 25
        assert dto.user_email == "alice@example.com"

    @pytest.mark.parametrize("minutes", [0, -5, "abc", "12.5"])
    def test_invalid_duration_rejected(self, minutes):
        with pytest.raises(ValidationError):
            StartWorkDTO(user_email="alice@example.com", recommended_time_min=minutes)

    def test_blank_email_rejected(self):
        with pytest.raises(ValidationError):
            StartWorkDTO(user_email="   ", recommended_time_min=10)
