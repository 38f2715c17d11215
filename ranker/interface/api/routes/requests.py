"""Restaurant request routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ranker.application.usecase.request import (
    RequestRestaurantRequest,
    RequestRestaurantResponse,
    RequestRestaurantUseCase,
)
from ranker.domain.error import ExternalServiceError, ValidationError

router = APIRouter(prefix="/api", tags=["requests"], route_class=DishkaRoute)


class RestaurantRequestAPIRequest(BaseModel):
    """API request for suggesting a new restaurant."""

    name: str | None = None
    location: str | None = None
    link: str | None = None


@router.post("/request", response_model=RequestRestaurantResponse)
async def request_restaurant(
    request: RestaurantRequestAPIRequest,
    request_restaurant_use_case: FromDishka[RequestRestaurantUseCase],
) -> RequestRestaurantResponse:
    """Suggest a restaurant for the list.

    The suggestion is emailed to the maintainers when mail is configured,
    otherwise it is only logged.

    Raises:
        HTTPException: 400 if name or location is missing, 500 if delivery fails
    """
    try:
        use_case_request = RequestRestaurantRequest(
            name=request.name,
            location=request.location,
            link=request.link,
        )
        return await request_restaurant_use_case.execute(use_case_request)
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ExternalServiceError as e:
        logfire.error("Restaurant request delivery failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send email",
        )
    except Exception as e:
        logfire.error("Restaurant request failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process request",
        )
