"""Cast vote use case."""

from pydantic import BaseModel, field_validator

from ranker.application.usecase.base import BaseUseCase
from ranker.application.usecase.restaurant.list_restaurants import RestaurantItem
from ranker.domain.service import CommentService, VoteService
from ranker.domain.value import VoteAction, parse_restaurant_id


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``previous_action`` is the client's own record of how it last voted on
    this restaurant (None if it never has).
    """

    restaurant_id: str  # UUID string
    action: VoteAction
    previous_action: VoteAction | None = None

    @field_validator("previous_action", mode="before")
    @classmethod
    def blank_previous_is_none(cls, v: object) -> object:
        return v or None


class CastVoteResponse(RestaurantItem):
    """Cast vote response (the restaurant after the vote)."""


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for upvoting, downvoting or switching a vote."""

    def __init__(
        self, vote_service: VoteService, comment_service: CommentService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The restaurant with updated counters

        Raises:
            NotFoundError: If the restaurant does not exist
            ValidationError: If the previous vote cannot be withdrawn
        """
        restaurant_id = parse_restaurant_id(request.restaurant_id)

        restaurant = await self.vote_service.cast_vote(
            restaurant_id=restaurant_id,
            action=request.action,
            previous=request.previous_action,
        )
        comments = await self.comment_service.get_comments_for_restaurant(
            restaurant_id
        )

        return CastVoteResponse(
            **RestaurantItem.from_domain(restaurant, comments).model_dump()
        )
