from datetime import datetime, tzinfo


def format_timestamp(moment: datetime) -> str:
    """Render a timezone-aware moment the way it is written to the sheet."""
    if moment.tzinfo is None:
        raise ValueError("Timestamps must be timezone-aware")
    return moment.isoformat(timespec="seconds")


def parse_timestamp(value: str, default_tz: tzinfo) -> datetime | None:
    """Parse a sheet cell into an aware datetime.

    Values without an offset are read in ``default_tz``. Empty or
    unparseable cells return None.
    """
    text = (value or "").strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed
