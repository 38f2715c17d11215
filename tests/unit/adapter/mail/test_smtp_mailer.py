"""Unit tests for the SMTP mailer."""

import smtplib

import pytest

from ranker.adapter.error import MailDeliveryError
from ranker.adapter.mail import SmtpMailer
from ranker.config import MailSettings
from ranker.domain.error import ExternalServiceError


class FakeSMTP:
    """Stand-in for smtplib.SMTP that records the exchange."""

    instances: list["FakeSMTP"] = []
    fail_login = False

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.logged_in_as = None
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, username, password):
        if FakeSMTP.fail_login:
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")
        self.logged_in_as = username

    def send_message(self, message):
        self.messages.append(message)


@pytest.fixture
def fake_smtp(monkeypatch):
    """Patch smtplib.SMTP with FakeSMTP."""
    FakeSMTP.instances = []
    FakeSMTP.fail_login = False
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


@pytest.fixture
def mail_settings():
    return MailSettings(
        host="smtp.example.com",
        port=587,
        username="owner@example.com",
        password="app-password",
    )


class TestSmtpMailer:
    """Tests for SmtpMailer."""

    def test_configured_with_credentials(self, mail_settings):
        """Credentials make the mailer configured."""
        assert SmtpMailer(mail_settings).is_configured

    def test_not_configured_without_credentials(self):
        """Without credentials the mailer is not configured."""
        assert not SmtpMailer(MailSettings()).is_configured

    @pytest.mark.asyncio
    async def test_send_uses_tls_and_login(self, fake_smtp, mail_settings):
        """Messages go out over STARTTLS to the operator's own address."""
        mailer = SmtpMailer(mail_settings)

        await mailer.send("Subject line", "Body text")

        smtp = fake_smtp.instances[0]
        assert smtp.host == "smtp.example.com"
        assert smtp.port == 587
        assert smtp.started_tls
        assert smtp.logged_in_as == "owner@example.com"
        message = smtp.messages[0]
        assert message["Subject"] == "Subject line"
        assert message["To"] == "owner@example.com"
        assert message["From"] == "owner@example.com"
        assert "Body text" in message.get_content()

    @pytest.mark.asyncio
    async def test_send_to_explicit_recipient(self, fake_smtp, mail_settings):
        """A configured recipient overrides the sender address."""
        settings = mail_settings.model_copy(update={"recipient": "team@example.com"})

        await SmtpMailer(settings).send("Subject", "Body")

        assert fake_smtp.instances[0].messages[0]["To"] == "team@example.com"

    @pytest.mark.asyncio
    async def test_smtp_failure_raises_delivery_error(self, fake_smtp, mail_settings):
        """SMTP errors become MailDeliveryError."""
        fake_smtp.fail_login = True
        mailer = SmtpMailer(mail_settings)

        with pytest.raises(MailDeliveryError) as exc_info:
            await mailer.send("Subject", "Body")

        assert isinstance(exc_info.value, ExternalServiceError)
