from .google_sheets_session_repository import GoogleSheetsSessionRepository

__all__ = ["GoogleSheetsSessionRepository"]
