from datetime import datetime, timedelta
from unittest.mock import AsyncMock
from zoneinfo import ZoneInfo

import pytest

from shoe_locker.application.ports.outbound import Clock
from shoe_locker.domain.entities import LockerSession
from shoe_locker.domain.value_objects import SessionStatus, format_timestamp

BANGKOK = ZoneInfo("Asia/Bangkok")


class FixedClock(Clock):
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 3, 1, 12, 0, 0, tzinfo=BANGKOK)


@pytest.fixture
def clock(now) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def mock_repository():
    return AsyncMock()


@pytest.fixture
def make_session(now):
    """Build a stored session whose deadline is ``minutes_left`` from ``now``."""

    def _make(
        user_email: str = "alice@example.com",
        minutes_left: int = 10,
        status: SessionStatus | str = SessionStatus.IN_PROGRESS,
        row_number: int = 2,
        log_id: str | None = None,
    ) -> LockerSession:
        finish = now + timedelta(minutes=minutes_left)
        return LockerSession(
            log_id=log_id or f"log-{row_number}",
            locker_id="L001",
            user_email=user_email,
            recommended_time_min=30,
            start_time=format_timestamp(finish - timedelta(minutes=30)),
            finish_time=format_timestamp(finish),
            status=status.value if isinstance(status, SessionStatus) else status,
            row_number=row_number,
        )

    return _make
