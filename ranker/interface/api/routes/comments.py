"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ranker.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from ranker.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/restaurants", tags=["comments"], route_class=DishkaRoute)

def _restaurant_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found"
    )


class CommentBody(BaseModel):
    # Empty text is let through so the domain can reject it with a readable message
    text: str = ""
    author: str | None = None


@router.post("/{restaurant_id}/comments", response_model=CreateCommentResponse)
async def add_comment(
    restaurant_id: str,
    body: CommentBody,
    use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Append a comment; a blank author is stored as "Anonymous".

    Responds 400 for blank text and 404 for an unknown restaurant.
    """
    try:
        return await use_case.execute(
            CreateCommentRequest(
                restaurant_id=restaurant_id, text=body.text, author=body.author
            )
        )
    except NotFoundError:
        logfire.warn("Comment on unknown restaurant", restaurant_id=restaurant_id)
        raise _restaurant_not_found()
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Adding comment failed", restaurant_id=restaurant_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add comment",
        )


@router.get("/{restaurant_id}/comments", response_model=GetCommentsResponse)
async def list_comments(
    restaurant_id: str,
    use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    try:
        return await use_case.execute(GetCommentsRequest(restaurant_id=restaurant_id))
    except NotFoundError:
        raise _restaurant_not_found()
    except Exception as e:
        logfire.error("Fetching comments failed", restaurant_id=restaurant_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )
