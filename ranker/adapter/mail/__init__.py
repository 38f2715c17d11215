"""Mail adapter."""

from .client import MockMailer, SmtpMailer

__all__ = ["MockMailer", "SmtpMailer"]
