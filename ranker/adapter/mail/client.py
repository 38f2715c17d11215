"""SMTP mail client.

Delivers restaurant requests to the operator's mailbox. ``smtplib`` is
blocking, so each send runs in a worker thread.
"""

import asyncio
import smtplib
from email.message import EmailMessage

import logfire

from ranker.adapter.error import MailDeliveryError
from ranker.config import MailSettings
from ranker.domain.service.notification_service import Mailer


class SmtpMailer(Mailer):
    """Mailer that submits messages to an SMTP server.

    The operator's own account is both sender and recipient unless
    ``MAIL__RECIPIENT`` says otherwise.
    """

    def __init__(self, settings: MailSettings) -> None:
        """Initialize SMTP mailer.

        Args:
            settings: Mail settings (host, port, credentials)
        """
        self.settings = settings

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    def _build_message(self, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.username
        message["To"] = self.settings.recipient_address
        message["Subject"] = subject
        message.set_content(body)
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(
            self.settings.host,
            self.settings.port,
            timeout=self.settings.timeout_seconds,
        ) as smtp:
            if self.settings.use_tls:
                smtp.starttls()
            smtp.login(self.settings.username or "", self.settings.password or "")
            smtp.send_message(message)

    async def send(self, subject: str, body: str) -> None:
        """Send a message to the operator.

        Raises:
            MailDeliveryError: If the SMTP exchange fails
        """
        with logfire.span(
            "smtp_mailer.send", host=self.settings.host, subject=subject
        ):
            message = self._build_message(subject, body)
            try:
                await asyncio.to_thread(self._send_sync, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error(
                    "Mail delivery failed",
                    host=self.settings.host,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise MailDeliveryError(self.settings.host, str(e)) from e

            logfire.info("Mail delivered", recipient=self.settings.recipient_address)


class MockMailer(Mailer):
    """Mock mailer for testing.

    Records messages instead of sending them and can be told to fail.
    """

    def __init__(self, configured: bool = True, fail: bool = False) -> None:
        self.configured = configured
        self.fail = fail
        self.sent: list[tuple[str, str]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send(self, subject: str, body: str) -> None:
        if self.fail:
            raise MailDeliveryError("mock", "delivery disabled by test")
        self.sent.append((subject, body))
