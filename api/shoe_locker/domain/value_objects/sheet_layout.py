from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

# Canonical A:K column order written by start-work.
COLUMNS: tuple[str, ...] = (
    "log_id",
    "locker_id",
    "user_email",
    "shoe_type",
    "recommended_time_min",
    "temperature",
    "humidity",
    "start_time",
    "finish_time",
    "pickup_time",
    "status",
)


@dataclass(frozen=True)
class SheetLayout:
    """Zero-based column position of every session field."""

    positions: Mapping[str, int]

    @classmethod
    def canonical(cls) -> "SheetLayout":
        return cls(MappingProxyType({name: i for i, name in enumerate(COLUMNS)}))

    @classmethod
    def from_header(cls, header: Sequence[str]) -> "SheetLayout":
        """Resolve positions by header name.

        A column missing from the header keeps its canonical position when
        no header cell occupies it, otherwise it moves past the last header
        cell. Two fields never share a column.
        """
        names = [str(cell).strip() for cell in header]
        taken = {i for i, name in enumerate(names) if name}
        positions = {column: names.index(column) for column in COLUMNS if column in names}

        missing = [column for column in COLUMNS if column not in positions]
        for column in missing:
            canonical = COLUMNS.index(column)
            if canonical not in taken:
                positions[column] = canonical
                taken.add(canonical)

        spill = len(names)
        for column in missing:
            if column in positions:
                continue
            while spill in taken:
                spill += 1
            positions[column] = spill
            taken.add(spill)

        return cls(MappingProxyType(positions))

    def index_of(self, column: str) -> int:
        return self.positions[column]

    def cell(self, row: Sequence[str], column: str) -> str:
        """Read a field from a row. Rows returned by the Sheets API drop trailing blanks."""
        index = self.positions[column]
        if index >= len(row):
            return ""
        value = row[index]
        return "" if value is None else str(value)
