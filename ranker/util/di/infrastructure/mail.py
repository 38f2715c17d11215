"""Mail providers."""

from dishka import Scope, provide
import logfire

from ranker.adapter.mail import SmtpMailer
from ranker.config import MailSettings
from ranker.domain.service import Mailer
from ranker.util.di.base import ProviderBase
from ranker.util.error import ConfigurationError


class MailProvider(ProviderBase):
    """Slot for the ``mail`` component."""

    __mock_component__ = "mail"


class SmtpMailProvider(MailProvider):
    __is_mock__ = False

    @provide(scope=Scope.APP)
    def mailer(self, mail_settings: MailSettings) -> Mailer:
        """SMTP mailer; without credentials it only reports itself unconfigured.

        Raises:
            ConfigurationError: If only one of username/password is set
        """
        if bool(mail_settings.username) != bool(mail_settings.password):
            raise ConfigurationError(
                "Mail credentials must be set together",
                "MAIL__USERNAME",
                "MAIL__PASSWORD",
            )
        if not mail_settings.is_configured:
            logfire.warn("Mail not configured; restaurant requests will only be logged")
        return SmtpMailer(settings=mail_settings)
