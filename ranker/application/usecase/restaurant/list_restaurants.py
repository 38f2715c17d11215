"""List restaurants use case (the ranking view)."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from ranker.application.usecase.base import BaseUseCase
from ranker.application.usecase.comment.get_comments import CommentItem
from ranker.domain.model import Comment, Restaurant
from ranker.domain.service import CommentService, RestaurantService


class RestaurantItem(BaseModel):
    """Restaurant item in response."""

    id: str
    name: str
    description: str
    website: str
    image_url: str
    upvotes: int
    downvotes: int
    score: int
    comment_count: int
    comments: list[CommentItem]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls, restaurant: Restaurant, comments: list[Comment] | None = None
    ) -> "RestaurantItem":
        return cls(
            id=str(restaurant.id),
            name=restaurant.name.root,
            description=restaurant.description,
            website=restaurant.website,
            image_url=restaurant.image_url,
            upvotes=restaurant.upvotes,
            downvotes=restaurant.downvotes,
            score=restaurant.score,
            comment_count=restaurant.comment_count,
            comments=[CommentItem.from_domain(c) for c in comments or []],
            created_at=restaurant.created_at,
            updated_at=restaurant.updated_at,
        )


class ListRestaurantsRequest(BaseModel):
    """List restaurants request."""

    include_comments: bool = True


class ListRestaurantsResponse(BaseModel):
    """List restaurants response."""

    restaurants: list[RestaurantItem]
    total: int


class ListRestaurantsUseCase(
    BaseUseCase[ListRestaurantsRequest, ListRestaurantsResponse]
):
    """Use case for listing restaurants ordered by score."""

    def __init__(
        self,
        restaurant_service: RestaurantService,
        comment_service: CommentService,
    ) -> None:
        """Initialize list restaurants use case.

        Args:
            restaurant_service: Restaurant domain service
            comment_service: Comment domain service
        """
        self.restaurant_service = restaurant_service
        self.comment_service = comment_service

    async def execute(self, request: ListRestaurantsRequest) -> ListRestaurantsResponse:
        """Execute list restaurants flow.

        Args:
            request: List restaurants request

        Returns:
            Restaurants, highest score first, with their comments
        """
        with logfire.span(
            "list_restaurants.execute", include_comments=request.include_comments
        ):
            restaurants = await self.restaurant_service.list_ranked()

            # Batch query to avoid N+1
            comments_by_restaurant = {}
            if request.include_comments and restaurants:
                comments_by_restaurant = (
                    await self.comment_service.get_comments_for_restaurants(
                        [restaurant.id for restaurant in restaurants]
                    )
                )

            items = [
                RestaurantItem.from_domain(
                    restaurant, comments_by_restaurant.get(restaurant.id, [])
                )
                for restaurant in restaurants
            ]

            return ListRestaurantsResponse(restaurants=items, total=len(items))
