"""Restaurant routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status

from ranker.application.usecase.restaurant import (
    ListRestaurantsRequest,
    ListRestaurantsResponse,
    ListRestaurantsUseCase,
)

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"], route_class=DishkaRoute)

# Edge caches may serve the ranking for a minute and revalidate in the background
RANKING_CACHE_CONTROL = "public, s-maxage=60, stale-while-revalidate=30"


@router.get("", response_model=ListRestaurantsResponse)
async def list_restaurants(
    response: Response,
    list_restaurants_use_case: FromDishka[ListRestaurantsUseCase],
    include_comments: bool = True,
) -> ListRestaurantsResponse:
    """List all restaurants, highest score first.

    Args:
        response: Outgoing response (for cache headers)
        list_restaurants_use_case: List restaurants use case from DI
        include_comments: Whether to embed each restaurant's comments

    Returns:
        Ranked restaurants
    """
    try:
        result = await list_restaurants_use_case.execute(
            ListRestaurantsRequest(include_comments=include_comments)
        )
    except Exception as e:
        logfire.error("Unexpected error listing restaurants", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch restaurants",
        )

    response.headers["Cache-Control"] = RANKING_CACHE_CONTROL
    return result
