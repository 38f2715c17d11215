"""List a restaurant's comments."""

from datetime import datetime

from pydantic import BaseModel

from ranker.application.usecase.base import BaseUseCase
from ranker.domain.error import NotFoundError
from ranker.domain.model import Comment
from ranker.domain.service import CommentService, RestaurantService
from ranker.domain.value import parse_restaurant_id


class CommentItem(BaseModel):
    comment_id: str
    restaurant_id: str
    text: str
    author: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            restaurant_id=str(comment.restaurant_id),
            text=comment.text,
            author=str(comment.author),
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    restaurant_id: str


class GetCommentsResponse(BaseModel):
    restaurant_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Comments of one restaurant, oldest first.

    Raises NotFoundError for unknown or malformed restaurant IDs rather
    than returning an empty list.
    """

    def __init__(
        self, comment_service: CommentService, restaurant_service: RestaurantService
    ) -> None:
        self.comment_service = comment_service
        self.restaurant_service = restaurant_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        restaurant_id = parse_restaurant_id(request.restaurant_id)
        if await self.restaurant_service.get_restaurant_by_id(restaurant_id) is None:
            raise NotFoundError("Restaurant", request.restaurant_id)

        comments = await self.comment_service.get_comments_for_restaurant(restaurant_id)
        return GetCommentsResponse(
            restaurant_id=str(restaurant_id),
            comments=[CommentItem.from_domain(c) for c in comments],
            total=len(comments),
        )
