from fastapi import APIRouter, Depends

from ....application.dtos import UpdateStatusResponseDTO
from ....application.ports.inbound import UpdateStatusUseCase
from ...middleware.cron_auth import require_cron_secret
from ..dependencies import get_update_status_use_case

router = APIRouter(prefix="/api", tags=["sessions"])


@router.post(
    "/update-status",
    response_model=UpdateStatusResponseDTO,
    summary="Flag elapsed sessions",
    description="Mark every session past its deadline as ready for pickup. Called by the scheduler.",
    # Route dependencies resolve before the use case builds the Sheets client
    dependencies=[Depends(require_cron_secret)],
)
async def update_status(
    use_case: UpdateStatusUseCase = Depends(get_update_status_use_case),
) -> UpdateStatusResponseDTO:
    return await use_case.execute()
