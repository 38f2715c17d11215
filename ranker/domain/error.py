"""Errors raised by the ranker domain.

The interface layer maps these onto HTTP status codes: ValidationError
is a 400, NotFoundError a 404 and ExternalServiceError a 500.
"""


class DomainError(Exception):
    """Base class for ranker domain errors."""


class ValidationError(DomainError):
    """Client input that breaks a domain rule."""


class VoteSwitchRefusedError(ValidationError):
    """A switch would withdraw a vote the ledger never counted."""

    def __init__(self, restaurant_id: str, previous: str | None):
        self.restaurant_id = restaurant_id
        self.previous = previous
        super().__init__(
            f"Cannot switch from {previous or 'no vote'}: no such vote was counted"
        )


class NotFoundError(DomainError):
    """The named resource does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ExternalServiceError(DomainError):
    """A collaborator outside the process (mail server) failed."""

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(f"{service} failed: {reason}")
