from .notice import ReadySoonNotice
from .session_status import SessionStatus
from .sheet_layout import COLUMNS, SheetLayout
from .timestamp import format_timestamp, parse_timestamp

__all__ = [
    "COLUMNS",
    "ReadySoonNotice",
    "SessionStatus",
    "SheetLayout",
    "format_timestamp",
    "parse_timestamp",
]
