from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    service_name: str = "shoe-locker-api"
    debug: bool = False
    max_request_size: int = 64 * 1024

    # Google Sheets
    sheet_id: str | None = None
    google_service_account_base64: str | None = None
    worksheet_name: str = ""  # Empty selects the first worksheet

    # Scheduled status updates
    cron_secret: str | None = None

    # AWS SES (Email)
    ses_sender_email: str = ""
    aws_region: str = "ap-southeast-1"
    aws_endpoint_url: str | None = None  # For LocalStack

    # Locker
    timezone: str = "Asia/Bangkok"
    default_locker_id: str = "L001"
    default_notify_percent: int = 95

    @property
    def sheets_configured(self) -> bool:
        return bool(self.sheet_id and self.google_service_account_base64)


settings = Settings()
