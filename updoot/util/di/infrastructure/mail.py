"""Mail infrastructure providers."""

from dishka import Scope, provide

from updoot.adapter.mail import SMTPMailClient
from updoot.config import MailSettings
from updoot.domain.service import MailClient
from updoot.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_client(self, settings: MailSettings) -> MailClient:
        """Provide SMTP mail client."""
        return SMTPMailClient(settings)
