from abc import ABC, abstractmethod
from typing import Any

from ....domain.entities import LockerSession


class SessionRepository(ABC):
    """Output port for locker session persistence."""

    @abstractmethod
    async def append(self, session: LockerSession) -> dict[str, Any]:
        """Persist a new session and return the store's write summary."""
        ...

    @abstractmethod
    async def list_sessions(self) -> list[LockerSession]:
        """Return every stored session in store order.

        Raises EmptyDatabaseError when the store holds no rows at all.
        """
        ...

    @abstractmethod
    async def mark_ready(self, sessions: list[LockerSession]) -> None:
        """Write the status of each given session in one batch."""
        ...

    @abstractmethod
    async def record_pickup(self, session: LockerSession) -> None:
        """Write the pickup time and status of a session."""
        ...

    @abstractmethod
    async def healthcheck(self) -> str:
        """Open the store and return its title."""
        ...
