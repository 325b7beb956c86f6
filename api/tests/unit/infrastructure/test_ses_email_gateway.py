from unittest.mock import AsyncMock, patch

import pytest
from botocore.exceptions import ClientError

from shoe_locker.infrastructure.adapters import SesEmailGateway


class TestSesEmailGateway:
    @pytest.fixture
    def gateway(self):
        return SesEmailGateway(
            sender_email="locker@example.com",
            region="ap-southeast-1",
        )

    @pytest.mark.asyncio
    async def test_send_email_success(self, gateway):
        with patch.object(gateway, "_session") as mock_session:
            mock_client = AsyncMock()
            mock_client.send_email = AsyncMock(return_value={"MessageId": "ses-msg-123"})
            mock_session.create_client.return_value.__aenter__.return_value = mock_client

            result = await gateway.send(
                recipient="alice@example.com",
                subject="Your shoes are almost ready 👟",
                html_body="<p>95%</p>",
                text_body="95%",
            )

        assert result.success is True
        assert result.external_id == "ses-msg-123"
        kwargs = mock_client.send_email.call_args.kwargs
        assert kwargs["Source"] == "locker@example.com"
        assert kwargs["Destination"] == {"ToAddresses": ["alice@example.com"]}
        assert kwargs["Message"]["Body"]["Html"]["Data"] == "<p>95%</p>"
        assert kwargs["Message"]["Body"]["Text"]["Data"] == "95%"

    @pytest.mark.asyncio
    async def test_create_client_uses_region_and_endpoint(self):
        gateway = SesEmailGateway(
            sender_email="locker@example.com",
            region="us-east-1",
            endpoint_url="http://localhost:4566",
        )
        with patch.object(gateway, "_session") as mock_session:
            mock_client = AsyncMock()
            mock_client.send_email = AsyncMock(return_value={"MessageId": "m-1"})
            mock_session.create_client.return_value.__aenter__.return_value = mock_client

            await gateway.send("alice@example.com", "s", "<p>h</p>", "t")

        mock_session.create_client.assert_called_once_with(
            "ses",
            region_name="us-east-1",
            endpoint_url="http://localhost:4566",
        )

    @pytest.mark.asyncio
    async def test_send_email_rejected(self, gateway):
        error = ClientError(
            {"Error": {"Code": "MessageRejected", "Message": "Email address is not verified."}},
            "SendEmail",
        )
        with patch.object(gateway, "_session") as mock_session:
            mock_client = AsyncMock()
            mock_client.send_email = AsyncMock(side_effect=error)
            mock_session.create_client.return_value.__aenter__.return_value = mock_client

            result = await gateway.send("alice@example.com", "s", "<p>h</p>", "t")

        assert result.success is False
        assert "not verified" in result.error
