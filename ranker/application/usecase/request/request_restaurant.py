"""Request restaurant use case."""

from pydantic import BaseModel

from ranker.application.usecase.base import BaseUseCase
from ranker.domain.service import NotificationService


class RequestRestaurantRequest(BaseModel):
    """Request a restaurant be added to the ranking."""

    name: str | None = None
    location: str | None = None
    link: str | None = None


class RequestRestaurantResponse(BaseModel):
    """Acknowledgement of a restaurant request."""

    message: str
    delivered: bool


class RequestRestaurantUseCase(
    BaseUseCase[RequestRestaurantRequest, RequestRestaurantResponse]
):
    """Use case for forwarding a restaurant request to the operator."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize request restaurant use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: RequestRestaurantRequest
    ) -> RequestRestaurantResponse:
        """Execute request restaurant flow.

        Raises:
            ValidationError: If name or location is missing
            ExternalServiceError: If the email could not be sent
        """
        delivered = await self.notification_service.submit_restaurant_request(
            name=request.name,
            location=request.location,
            link=request.link,
        )

        if delivered:
            return RequestRestaurantResponse(
                message="Request sent successfully", delivered=True
            )
        return RequestRestaurantResponse(
            message="Request received (logged only)", delivered=False
        )
