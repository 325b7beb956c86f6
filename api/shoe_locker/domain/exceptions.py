"""Domain errors.

Each error carries the HTTP status it maps to and the response key its
message is reported under.
"""


class ShoeLockerError(Exception):
    """Base error for the shoe locker service."""

    status_code: int = 500
    error_key: str = "message"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ShoeLockerError):
    """Raised when a required setting is missing or unusable."""

    status_code = 500


class EmailConfigurationError(ConfigurationError):
    """Raised when the email sender is not configured."""

    error_key = "error"


class UnauthorizedError(ShoeLockerError):
    """Raised when a scheduled call presents a wrong shared secret."""

    status_code = 401


class EmptyDatabaseError(ShoeLockerError):
    """Raised when the sheet holds no rows at all, not even a header."""

    status_code = 404


class NoActiveSessionError(ShoeLockerError):
    """Raised when a user has no session awaiting pickup."""

    status_code = 404


class EmailDeliveryError(ShoeLockerError):
    """Raised when the email provider rejects a message."""

    status_code = 500
    error_key = "error"


class InvalidSessionError(ShoeLockerError):
    """Raised when a stored session row cannot be interpreted."""

    status_code = 500
