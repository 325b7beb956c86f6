from fastapi import APIRouter, Depends

from ....application.dtos import SendEmailDTO, SendEmailResponseDTO
from ....application.ports.inbound import SendEmailUseCase
from ..dependencies import get_send_email_use_case

router = APIRouter(prefix="/api", tags=["notifications"])


@router.post(
    "/send-email",
    response_model=SendEmailResponseDTO,
    summary="Send the near-completion email",
)
async def send_email(
    dto: SendEmailDTO,
    use_case: SendEmailUseCase = Depends(get_send_email_use_case),
) -> SendEmailResponseDTO:
    return await use_case.execute(dto)
