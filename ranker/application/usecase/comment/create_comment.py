"""Append a comment to a restaurant."""

import logfire
from pydantic import BaseModel

from ranker.application.usecase.base import BaseUseCase
from ranker.domain.error import NotFoundError
from ranker.domain.service import CommentService, RestaurantService
from ranker.domain.value import parse_restaurant_id

from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    restaurant_id: str
    text: str
    # Blank or missing signs the comment "Anonymous"
    author: str | None = None


class CreateCommentResponse(CommentItem):
    pass


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Append a comment and bump the restaurant's comment_count.

    The count is only incremented after the comment is stored, so a
    rejected comment leaves the restaurant untouched.
    """

    def __init__(
        self, comment_service: CommentService, restaurant_service: RestaurantService
    ) -> None:
        self.comment_service = comment_service
        self.restaurant_service = restaurant_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """
        Raises:
            NotFoundError: Unknown or malformed restaurant ID
            ValidationError: Blank comment text
        """
        restaurant_id = parse_restaurant_id(request.restaurant_id)
        with logfire.span("create_comment.execute", restaurant_id=str(restaurant_id)):
            if await self.restaurant_service.get_restaurant_by_id(restaurant_id) is None:
                raise NotFoundError("Restaurant", request.restaurant_id)

            comment = await self.comment_service.create_comment(
                restaurant_id, request.text, author=request.author
            )
            await self.restaurant_service.increment_comment_count(restaurant_id)

        return CreateCommentResponse.model_validate(
            CommentItem.from_domain(comment).model_dump()
        )
