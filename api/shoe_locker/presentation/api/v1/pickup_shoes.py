from fastapi import APIRouter, Depends

from ....application.dtos import PickupShoesDTO, PickupShoesResponseDTO
from ....application.ports.inbound import PickupShoesUseCase
from ..dependencies import get_pickup_shoes_use_case

router = APIRouter(prefix="/api", tags=["sessions"])


@router.post(
    "/pickup-shoes",
    response_model=PickupShoesResponseDTO,
    response_model_exclude_none=True,
    summary="Record a pickup",
    description="Close the user's latest active session once its deadline has passed.",
)
async def pickup_shoes(
    dto: PickupShoesDTO,
    use_case: PickupShoesUseCase = Depends(get_pickup_shoes_use_case),
) -> PickupShoesResponseDTO:
    return await use_case.execute(dto)
