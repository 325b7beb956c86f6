"""Google Sheets implementation of the session repository.

The spreadsheet is a makeshift database: row 1 holds column names and
every following row is one locker session. gspread is synchronous, so
each call runs in a worker thread to keep the event loop free.
"""

import asyncio
from typing import Any

import gspread
import structlog
from gspread.utils import rowcol_to_a1

from ....application.ports.outbound import SessionRepository
from ....domain.entities import LockerSession
from ....domain.exceptions import EmptyDatabaseError
from ....domain.value_objects import COLUMNS, SheetLayout
from ...logging import Timer

logger = structlog.get_logger()

VALUE_INPUT_OPTION = "USER_ENTERED"


def _parse_minutes(value: str) -> int | None:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


class GoogleSheetsSessionRepository(SessionRepository):
    """Session storage backed by one worksheet."""

    def __init__(
        self,
        client: gspread.Client,
        spreadsheet_id: str,
        worksheet_name: str | None = None,
    ) -> None:
        self._client = client
        self._spreadsheet_id = spreadsheet_id
        self._worksheet_name = worksheet_name
        self._spreadsheet: gspread.Spreadsheet | None = None
        self._worksheet: gspread.Worksheet | None = None
        self._layout = SheetLayout.canonical()

    def _open_spreadsheet(self) -> gspread.Spreadsheet:
        if self._spreadsheet is None:
            self._spreadsheet = self._client.open_by_key(self._spreadsheet_id)
        return self._spreadsheet

    def _open_worksheet(self) -> gspread.Worksheet:
        if self._worksheet is None:
            spreadsheet = self._open_spreadsheet()
            if self._worksheet_name:
                self._worksheet = spreadsheet.worksheet(self._worksheet_name)
            else:
                self._worksheet = spreadsheet.sheet1
        return self._worksheet

    # Synchronous gspread calls, run via asyncio.to_thread

    def _append_sync(self, row: list[Any]) -> dict[str, Any]:
        worksheet = self._open_worksheet()
        if not worksheet.row_values(1):
            logger.info("Writing header row to empty sheet")
            worksheet.append_row(list(COLUMNS), value_input_option=VALUE_INPUT_OPTION)
        response = worksheet.append_row(
            row,
            value_input_option=VALUE_INPUT_OPTION,
            table_range="A1",
        )
        return dict(response or {})

    def _read_all_sync(self) -> list[list[str]]:
        return self._open_worksheet().get_all_values()

    def _batch_update_sync(self, data: list[dict[str, Any]]) -> None:
        self._open_worksheet().batch_update(data, value_input_option=VALUE_INPUT_OPTION)

    def _title_sync(self) -> str:
        return self._open_spreadsheet().title

    # SessionRepository

    async def append(self, session: LockerSession) -> dict[str, Any]:
        with Timer() as t:
            response = await asyncio.to_thread(self._append_sync, session.to_row())
        logger.info(
            "Session row appended",
            log_id=session.log_id,
            updated_range=response.get("updates", {}).get("updatedRange"),
            duration_ms=t.duration_ms,
        )
        return response

    async def list_sessions(self) -> list[LockerSession]:
        with Timer() as t:
            rows = await asyncio.to_thread(self._read_all_sync)
        logger.debug("Sheet read", row_count=len(rows), duration_ms=t.duration_ms)

        if not rows:
            raise EmptyDatabaseError("Database is empty.")

        self._layout = SheetLayout.from_header(rows[0])
        return [
            self._to_session(row, row_number)
            for row_number, row in enumerate(rows[1:], start=2)
            if any(str(cell).strip() for cell in row)
        ]

    async def mark_ready(self, sessions: list[LockerSession]) -> None:
        if not sessions:
            return
        data = [self._status_cell(session) for session in sessions]
        with Timer() as t:
            await asyncio.to_thread(self._batch_update_sync, data)
        logger.info("Status cells updated", count=len(data), duration_ms=t.duration_ms)

    async def record_pickup(self, session: LockerSession) -> None:
        data = [
            self._cell(session, "pickup_time", session.pickup_time),
            self._status_cell(session),
        ]
        with Timer() as t:
            await asyncio.to_thread(self._batch_update_sync, data)
        logger.info(
            "Pickup written",
            log_id=session.log_id,
            row_number=session.row_number,
            duration_ms=t.duration_ms,
        )

    async def healthcheck(self) -> str:
        return await asyncio.to_thread(self._title_sync)

    # Row mapping

    def _to_session(self, row: list[str], row_number: int) -> LockerSession:
        cell = self._layout.cell
        return LockerSession(
            log_id=cell(row, "log_id"),
            locker_id=cell(row, "locker_id"),
            user_email=cell(row, "user_email").strip(),
            recommended_time_min=_parse_minutes(cell(row, "recommended_time_min")),
            start_time=cell(row, "start_time"),
            finish_time=cell(row, "finish_time"),
            status=cell(row, "status").strip(),
            shoe_type=cell(row, "shoe_type"),
            temperature=cell(row, "temperature"),
            humidity=cell(row, "humidity"),
            pickup_time=cell(row, "pickup_time"),
            row_number=row_number,
        )

    def _cell(self, session: LockerSession, column: str, value: str) -> dict[str, Any]:
        if session.row_number is None:
            raise ValueError(f"Session {session.log_id} was not read from the sheet")
        a1 = rowcol_to_a1(session.row_number, self._layout.index_of(column) + 1)
        return {"range": a1, "values": [[value]]}

    def _status_cell(self, session: LockerSession) -> dict[str, Any]:
        return self._cell(session, "status", session.status)
