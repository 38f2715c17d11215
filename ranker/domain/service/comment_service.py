"""Comment log service."""

from datetime import datetime
from uuid import uuid4

import logfire

from ranker.domain.error import ValidationError
from ranker.domain.model.comment import Comment
from ranker.domain.repository import CommentRepository
from ranker.domain.value import CommentAuthor, CommentId, RestaurantId


class CommentService:
    """Appends to and reads from each restaurant's comment log."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        restaurant_id: RestaurantId,
        text: str,
        author: str | None = None,
    ) -> Comment:
        """Append a comment.

        Does not check that the restaurant exists; callers do that first.

        Raises:
            ValidationError: If ``text`` is blank
        """
        body = text.strip()
        if not body:
            logfire.warn("Blank comment rejected", restaurant_id=str(restaurant_id))
            raise ValidationError("Comment text is required")

        comment = Comment(
            id=CommentId(uuid4()),
            restaurant_id=restaurant_id,
            text=body,
            author=CommentAuthor(author or ""),
            created_at=datetime.now(),
        )
        with logfire.span(
            "comment_service.create_comment", restaurant_id=str(restaurant_id)
        ):
            await self.comment_repository.save(comment)

        logfire.info(
            "Comment appended",
            comment_id=str(comment.id),
            restaurant_id=str(restaurant_id),
            author=str(comment.author),
        )
        return comment

    async def get_comments_for_restaurant(
        self, restaurant_id: RestaurantId
    ) -> list[Comment]:
        """Oldest first."""
        return await self.comment_repository.find_by_restaurant(restaurant_id)

    async def get_comments_for_restaurants(
        self, restaurant_ids: list[RestaurantId]
    ) -> dict[RestaurantId, list[Comment]]:
        """Comments for many restaurants at once, keyed by restaurant."""
        if not restaurant_ids:
            return {}
        with logfire.span(
            "comment_service.get_comments_for_restaurants", count=len(restaurant_ids)
        ):
            return await self.comment_repository.find_by_restaurants(restaurant_ids)
