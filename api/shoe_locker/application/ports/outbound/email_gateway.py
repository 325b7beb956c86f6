from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class DeliveryResult:
    """Result of an email delivery attempt."""
    success: bool
    external_id: str | None = None
    error: str | None = None


class EmailGateway(ABC):
    """Output port for email delivery."""

    @abstractmethod
    async def send(
        self,
        recipient: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> DeliveryResult:
        """Send one email."""
        ...
