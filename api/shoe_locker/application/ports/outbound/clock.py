from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Output port for the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware time."""
        ...
