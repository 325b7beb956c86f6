from .notification.ses_email_gateway import SesEmailGateway
from .persistence.google_sheets_session_repository import GoogleSheetsSessionRepository

__all__ = [
    "GoogleSheetsSessionRepository",
    "SesEmailGateway",
]
