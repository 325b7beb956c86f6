from .locker_session import LockerSession

__all__ = ["LockerSession"]
