"""Email infrastructure providers."""

from dishka import Scope, provide

from skillswap.adapter.email.client import HttpEmailSender, LoggingEmailSender
from skillswap.config import Settings
from skillswap.domain.service.mail_service import EmailSender
from skillswap.util.di.base import ProviderBase
from skillswap.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: Settings) -> EmailSender:
        """Provide the email sender.

        Raises:
            ConfigurationError: If email is enabled without an API key
        """
        if not settings.email.enabled:
            return LoggingEmailSender()
        if not settings.email.api_key:
            raise ConfigurationError("EMAIL__API_KEY must be set when email is enabled")

        return HttpEmailSender(
            api_url=settings.email.api_url,
            api_key=settings.email.api_key,
            from_address=settings.email.from_address,
            timeout=settings.email.timeout_seconds,
        )
