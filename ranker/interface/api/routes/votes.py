"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from ranker.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.value import VoteAction

router = APIRouter(prefix="/api/restaurants", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for casting a vote.

    Accepts both ``previousAction`` and ``previous_action``.
    """

    model_config = ConfigDict(populate_by_name=True)

    action: str | None = None
    previous_action: str | None = Field(default=None, alias="previousAction")


async def _cast_vote(
    use_case: CastVoteUseCase,
    restaurant_id: str,
    action: str | None,
    previous_action: str | None,
) -> CastVoteResponse:
    try:
        request = CastVoteRequest(
            restaurant_id=restaurant_id,
            action=action,
            previous_action=previous_action,
        )
    except ValueError:
        logfire.warn(
            "Invalid vote request",
            restaurant_id=restaurant_id,
            action=action,
            previous_action=previous_action,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="action must be 'upvote' or 'downvote'; "
            "previousAction must be 'upvote', 'downvote' or null",
        )

    try:
        return await use_case.execute(request)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Restaurant not found",
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error voting", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to vote",
        )


@router.post("/{restaurant_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    restaurant_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote, downvote, or switch a previous vote.

    Sending the same action as ``previousAction`` is a no-op that echoes
    the current restaurant.

    Args:
        restaurant_id: Restaurant UUID
        request: Vote data (action and the client's previous action)
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        The restaurant after the vote

    Raises:
        HTTPException: 400 on invalid action, 404 if restaurant not found
    """
    return await _cast_vote(
        cast_vote_use_case, restaurant_id, request.action, request.previous_action
    )


@router.post("/{restaurant_id}/upvote", response_model=CastVoteResponse)
async def upvote(
    restaurant_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Count a fresh upvote (legacy endpoint, no vote switching)."""
    return await _cast_vote(
        cast_vote_use_case, restaurant_id, VoteAction.UPVOTE.value, None
    )


@router.post("/{restaurant_id}/downvote", response_model=CastVoteResponse)
async def downvote(
    restaurant_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Count a fresh downvote (legacy endpoint, no vote switching)."""
    return await _cast_vote(
        cast_vote_use_case, restaurant_id, VoteAction.DOWNVOTE.value, None
    )
