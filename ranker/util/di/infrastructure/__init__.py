"""Infrastructure providers."""

from .mail import MailProvider, SmtpMailProvider
from .persistence import PersistenceProvider, PostgresPersistenceProvider

__all__ = [
    "MailProvider",
    "PersistenceProvider",
    "PostgresPersistenceProvider",
    "SmtpMailProvider",
]
