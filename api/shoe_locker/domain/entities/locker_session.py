from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import uuid4

from ..exceptions import InvalidSessionError
from ..value_objects import SessionStatus, format_timestamp, parse_timestamp


@dataclass
class LockerSession:
    """One cleaning cycle, stored as a single sheet row.

    Timestamps are kept as the strings found in the sheet; ``row_number``
    is the 1-based sheet row for sessions that were read back.
    """

    log_id: str
    locker_id: str
    user_email: str
    recommended_time_min: int | None
    start_time: str
    finish_time: str
    status: str
    shoe_type: str = ""
    temperature: str = ""
    humidity: str = ""
    pickup_time: str = ""
    row_number: int | None = None

    @classmethod
    def start(
        cls,
        user_email: str,
        recommended_time_min: int,
        now: datetime,
        locker_id: str,
        shoe_type: str = "",
        temperature: str = "",
        humidity: str = "",
    ) -> "LockerSession":
        """Factory method for a new cleaning cycle."""
        if recommended_time_min <= 0:
            raise ValueError("recommended_time_min must be a positive number")
        finish = now + timedelta(minutes=recommended_time_min)
        return cls(
            log_id=str(uuid4()),
            locker_id=locker_id,
            user_email=user_email,
            recommended_time_min=recommended_time_min,
            start_time=format_timestamp(now),
            finish_time=format_timestamp(finish),
            status=SessionStatus.IN_PROGRESS.value,
            shoe_type=shoe_type,
            temperature=temperature,
            humidity=humidity,
        )

    @property
    def known_status(self) -> SessionStatus | None:
        return SessionStatus.from_label(self.status)

    @property
    def is_active(self) -> bool:
        status = self.known_status
        return status is not None and status.is_active

    def deadline(self, now: datetime) -> datetime | None:
        """Finish time as an aware datetime, read in the timezone of ``now``."""
        return parse_timestamp(self.finish_time, now.tzinfo)

    def is_finished(self, now: datetime) -> bool:
        """True once ``now`` has reached the deadline."""
        deadline = self.deadline(now)
        if deadline is None:
            raise InvalidSessionError(
                f"Session {self.log_id} has an unreadable finish_time: {self.finish_time!r}"
            )
        return now >= deadline

    def needs_ready_flag(self, now: datetime) -> bool:
        """Whether a status sweep should flag this session ready for pickup."""
        if self.known_status in (SessionStatus.PICKED_UP, SessionStatus.READY_FOR_PICKUP):
            return False
        deadline = self.deadline(now)
        return deadline is not None and deadline < now

    def mark_ready(self) -> None:
        self.status = SessionStatus.READY_FOR_PICKUP.value

    def mark_picked_up(self, now: datetime) -> None:
        """Record the pickup moment and close the session."""
        if not self.is_active:
            raise ValueError(f"Cannot pick up session in {self.status!r} status")
        self.pickup_time = format_timestamp(now)
        self.status = SessionStatus.PICKED_UP.value

    def to_row(self) -> list[str | int]:
        """Values in canonical A:K column order."""
        return [
            self.log_id,
            self.locker_id,
            self.user_email,
            self.shoe_type,
            self.recommended_time_min if self.recommended_time_min is not None else "",
            self.temperature,
            self.humidity,
            self.start_time,
            self.finish_time,
            self.pickup_time,
            self.status,
        ]
