from enum import Enum


class SessionStatus(str, Enum):
    """Status labels as stored in the sheet and shown on the kiosk."""

    IN_PROGRESS = "กำลังทำงาน"
    READY_FOR_PICKUP = "พร้อมส่งมอบรองเท้า"
    PICKED_UP = "ผู้ใช้รับรองเท้าเรียบร้อย"

    @property
    def is_active(self) -> bool:
        return self in (SessionStatus.IN_PROGRESS, SessionStatus.READY_FOR_PICKUP)

    @classmethod
    def from_label(cls, label: str) -> "SessionStatus | None":
        """Match a cell value to a status, or None for unknown labels."""
        try:
            return cls(label.strip())
        except ValueError:
            return None
