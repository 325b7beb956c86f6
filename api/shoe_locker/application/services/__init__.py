from .pickup_shoes_service import PickupShoesService
from .send_email_service import SendEmailService
from .start_work_service import StartWorkService
from .update_status_service import UpdateStatusService

__all__ = [
    "PickupShoesService",
    "SendEmailService",
    "StartWorkService",
    "UpdateStatusService",
]
