from fastapi import APIRouter, Depends

from ....application.dtos import StartWorkDTO, StartWorkResponseDTO
from ....application.ports.inbound import StartWorkUseCase
from ..dependencies import get_start_work_use_case

router = APIRouter(prefix="/api", tags=["sessions"])


@router.post(
    "/start-work",
    response_model=StartWorkResponseDTO,
    summary="Start a cleaning cycle",
    description="Create a session row with a deadline computed from the recommended duration.",
)
async def start_work(
    dto: StartWorkDTO,
    use_case: StartWorkUseCase = Depends(get_start_work_use_case),
) -> StartWorkResponseDTO:
    return await use_case.execute(dto)
