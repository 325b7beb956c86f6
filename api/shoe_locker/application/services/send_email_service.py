from ...domain.exceptions import EmailDeliveryError
from ...domain.value_objects import ReadySoonNotice
from ..dtos import SendEmailDTO, SendEmailResponseDTO
from ..ports.inbound import SendEmailUseCase
from ..ports.outbound import EmailGateway


class SendEmailService(SendEmailUseCase):
    """Sends the canned near-completion notice."""

    def __init__(self, gateway: EmailGateway, default_percent: int = 95) -> None:
        self._gateway = gateway
        self._default_percent = default_percent

    async def execute(self, dto: SendEmailDTO) -> SendEmailResponseDTO:
        notice = ReadySoonNotice(
            recipient=dto.user_email.strip(),
            percent=dto.percent or self._default_percent,
        )

        result = await self._gateway.send(
            recipient=notice.recipient,
            subject=notice.subject,
            html_body=notice.html_body,
            text_body=notice.text_body,
        )
        if not result.success:
            raise EmailDeliveryError(result.error or "Email delivery failed")

        return SendEmailResponseDTO(success=True, data={"id": result.external_id})
