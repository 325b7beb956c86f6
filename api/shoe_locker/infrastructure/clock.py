from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..application.ports.outbound import Clock
from ..domain.exceptions import ConfigurationError


class ZoneClock(Clock):
    """Wall clock pinned to the locker's local timezone."""

    def __init__(self, timezone_name: str) -> None:
        try:
            self._tz = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown timezone: {timezone_name}") from e

    @property
    def tz(self) -> ZoneInfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz).replace(microsecond=0)
