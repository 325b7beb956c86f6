import structlog
from aiobotocore.session import get_session
from botocore.exceptions import BotoCoreError, ClientError

from ....application.ports.outbound import DeliveryResult, EmailGateway
from ...logging import Timer

logger = structlog.get_logger()


class SesEmailGateway(EmailGateway):
    """AWS SES email gateway."""

    def __init__(
        self,
        sender_email: str,
        region: str = "ap-southeast-1",
        endpoint_url: str | None = None,
    ) -> None:
        self._sender_email = sender_email
        self._region = region
        self._endpoint_url = endpoint_url
        self._session = get_session()

    async def send(
        self,
        recipient: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> DeliveryResult:
        """Send an email via SES."""
        try:
            with Timer() as t:
                async with self._session.create_client(
                    "ses",
                    region_name=self._region,
                    endpoint_url=self._endpoint_url,
                ) as client:
                    response = await client.send_email(
                        Source=self._sender_email,
                        Destination={"ToAddresses": [recipient]},
                        Message={
                            "Subject": {"Data": subject, "Charset": "UTF-8"},
                            "Body": {
                                "Html": {"Data": html_body, "Charset": "UTF-8"},
                                "Text": {"Data": text_body, "Charset": "UTF-8"},
                            },
                        },
                    )

            message_id = response.get("MessageId")
            logger.info(
                "Email sent",
                message_id=message_id,
                recipient=recipient,
                duration_ms=t.duration_ms,
            )
            return DeliveryResult(success=True, external_id=message_id)

        except (BotoCoreError, ClientError) as e:
            logger.error("Email delivery failed", error=str(e), recipient=recipient)
            return DeliveryResult(success=False, error=str(e))
