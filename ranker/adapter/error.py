"""Adapter errors."""

from ranker.domain.error import ExternalServiceError


class MailDeliveryError(ExternalServiceError):
    """The SMTP server refused or never received a message."""

    def __init__(self, host: str, reason: str):
        self.host = host
        super().__init__(service=f"SMTP {host}", reason=reason)
