"""Restaurant request notification service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from ranker.domain.error import ValidationError
from ranker.domain.model.restaurant_request import RestaurantRequest


class Mailer:
    """Outbound mail interface.

    Implementations live in the adapter layer.
    """

    @property
    def is_configured(self) -> bool:
        """Whether the mailer can actually deliver messages."""
        raise NotImplementedError

    async def send(self, subject: str, body: str) -> None:
        """Send a message to the operator.

        Args:
            subject: Subject line
            body: Plain-text body

        Raises:
            ExternalServiceError: If delivery fails
        """
        raise NotImplementedError


class NotificationService:
    """Forwards visitor requests for new restaurants to the operator."""

    def __init__(self, mailer: Mailer) -> None:
        """Initialize notification service.

        Args:
            mailer: Outbound mailer
        """
        self.mailer = mailer

    @staticmethod
    def compose(request: RestaurantRequest) -> tuple[str, str]:
        """Build the subject and body for a restaurant request."""
        subject = f"New Halal Chicken Spot Request: {request.name}"
        body = (
            "New Restaurant Request:\n"
            "\n"
            f"Name: {request.name}\n"
            f"Location: {request.location}\n"
            f"Link: {request.link or 'N/A'}\n"
            "\n"
            "Sent from Halal Hot Chicken Ranker\n"
        )
        return subject, body

    async def submit_restaurant_request(
        self, name: str | None, location: str | None, link: str | None = None
    ) -> bool:
        """Validate a request and forward it to the operator.

        Args:
            name: Restaurant name
            location: Where the restaurant is
            link: Optional website or map link

        Returns:
            True if an email was sent, False if the mailer is not
            configured and the request was only logged

        Raises:
            ValidationError: If name or location is missing, or a field is
                too long
            ExternalServiceError: If mail delivery fails
        """
        if not (name and name.strip()) or not (location and location.strip()):
            raise ValidationError("Name and location are required")

        try:
            request = RestaurantRequest(name=name, location=location, link=link)
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ValidationError(f"Invalid request fields: {', '.join(fields)}") from e

        with logfire.span(
            "notification_service.submit_restaurant_request",
            name=request.name,
            location=request.location,
        ):
            if not self.mailer.is_configured:
                logfire.info(
                    "Restaurant request received (mail not configured)",
                    name=request.name,
                    location=request.location,
                    link=request.link,
                )
                return False

            subject, body = self.compose(request)
            await self.mailer.send(subject, body)
            logfire.info("Restaurant request sent", name=request.name)
            return True
