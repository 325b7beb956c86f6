from fastapi import Depends

from ...application.ports.inbound import (
    PickupShoesUseCase,
    SendEmailUseCase,
    StartWorkUseCase,
    UpdateStatusUseCase,
)
from ...application.ports.outbound import Clock, EmailGateway, SessionRepository
from ...application.services import (
    PickupShoesService,
    SendEmailService,
    StartWorkService,
    UpdateStatusService,
)
from ...config import settings
from ...domain.exceptions import ConfigurationError, EmailConfigurationError
from ...infrastructure.adapters import GoogleSheetsSessionRepository, SesEmailGateway
from ...infrastructure.clock import ZoneClock
from ...infrastructure.credentials import build_sheets_client


def get_clock() -> Clock:
    return ZoneClock(settings.timezone)


def get_session_repository() -> SessionRepository:
    if not settings.sheets_configured:
        raise ConfigurationError(
            "Configuration Error: Missing SHEET_ID or GOOGLE_SERVICE_ACCOUNT_BASE64."
        )
    client = build_sheets_client(settings.google_service_account_base64)
    return GoogleSheetsSessionRepository(
        client=client,
        spreadsheet_id=settings.sheet_id,
        worksheet_name=settings.worksheet_name or None,
    )


def get_email_gateway() -> EmailGateway:
    if not settings.ses_sender_email:
        raise EmailConfigurationError("Configuration Error: Missing SES_SENDER_EMAIL.")
    return SesEmailGateway(
        sender_email=settings.ses_sender_email,
        region=settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
    )


def get_start_work_use_case(
    repository: SessionRepository = Depends(get_session_repository),
    clock: Clock = Depends(get_clock),
) -> StartWorkUseCase:
    return StartWorkService(repository, clock, default_locker_id=settings.default_locker_id)


def get_update_status_use_case(
    repository: SessionRepository = Depends(get_session_repository),
    clock: Clock = Depends(get_clock),
) -> UpdateStatusUseCase:
    return UpdateStatusService(repository, clock)


def get_pickup_shoes_use_case(
    repository: SessionRepository = Depends(get_session_repository),
    clock: Clock = Depends(get_clock),
) -> PickupShoesUseCase:
    return PickupShoesService(repository, clock)


def get_send_email_use_case(
    gateway: EmailGateway = Depends(get_email_gateway),
) -> SendEmailUseCase:
    return SendEmailService(gateway, default_percent=settings.default_notify_percent)
