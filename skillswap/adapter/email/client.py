"""Email delivery over an HTTP email API (Resend-compatible)."""

import httpx
import logfire

from skillswap.adapter.error import EmailDeliveryError
from skillswap.domain.service.mail_service import EmailMessage, EmailSender


class HttpEmailSender(EmailSender):
    """Sends email through a JSON HTTP API authenticated with a bearer key."""

    def __init__(
        self, api_url: str, api_key: str, from_address: str, timeout: float = 10.0
    ) -> None:
        """Initialize the sender.

        Args:
            api_url: Endpoint accepting ``{from, to, subject, text, html}``
            api_key: Provider API key
            from_address: Sender shown to recipients
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.api_key = api_key
        self.from_address = from_address
        self.timeout = timeout

    async def send(self, message: EmailMessage) -> None:
        payload = {
            "from": self.from_address,
            "to": [message.to],
            "subject": message.subject,
            "text": message.text,
            "html": message.html,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"HTTP error sending email: {e}")

        if response.status_code >= 300:
            logfire.error(
                "Email API rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            raise EmailDeliveryError(
                f"Email API returned {response.status_code}", response.status_code
            )


class LoggingEmailSender(EmailSender):
    """Logs emails instead of sending them (email disabled)."""

    async def send(self, message: EmailMessage) -> None:
        logfire.info(
            "Email delivery disabled, message not sent",
            to=message.to,
            subject=message.subject,
        )


class MockEmailSender(EmailSender):
    """Records messages in memory for tests."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[EmailMessage] = []
        self.fail = fail

    async def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock email failure", 500)
        self.sent.append(message)

    def sent_to(self, address: str) -> list[EmailMessage]:
        return [message for message in self.sent if message.to == address]
