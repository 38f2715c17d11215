"""Vote ledger service."""

import logfire

from ranker.domain.error import NotFoundError, VoteSwitchRefusedError
from ranker.domain.model.restaurant import Restaurant
from ranker.domain.model.vote import VoteTransition
from ranker.domain.repository import RestaurantRepository
from ranker.domain.value import RestaurantId, VoteAction


class VoteService:
    """Applies vote transitions to restaurant counters.

    Clients are anonymous, so the service trusts the client's record of
    its previous vote. The only guard is that counters never go negative.
    """

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self.restaurant_repository = restaurant_repository

    async def cast_vote(
        self,
        restaurant_id: RestaurantId,
        action: VoteAction,
        previous: VoteAction | None = None,
    ) -> Restaurant:
        """Move a client's vote from ``previous`` to ``action``.

        Args:
            restaurant_id: Restaurant being voted on
            action: The client's new vote
            previous: The vote the client cast last time, if any

        Returns:
            The restaurant after the transition (unchanged for a repeat vote)

        Raises:
            NotFoundError: If the restaurant does not exist
            VoteSwitchRefusedError: If withdrawing ``previous`` would drive
                a counter negative
        """
        transition = VoteTransition(action=action, previous=previous)
        attributes = {
            "restaurant_id": str(restaurant_id),
            "action": action.value,
            "previous": previous.value if previous else None,
        }

        with logfire.span("vote_service.cast_vote", **attributes):
            if transition.is_noop:
                logfire.info("Repeated vote ignored", **attributes)
                return await self._require(restaurant_id)

            updated = await self.restaurant_repository.apply_vote_delta(
                restaurant_id, transition.delta
            )
            if updated is not None:
                logfire.info("Vote applied", score=updated.score, **attributes)
                return updated

            # The guarded update matched no row: missing, or refused
            current = await self._require(restaurant_id)
            logfire.warn(
                "Vote switch refused",
                upvotes=current.upvotes,
                downvotes=current.downvotes,
                **attributes,
            )
            raise VoteSwitchRefusedError(
                str(restaurant_id), previous.value if previous else None
            )

    async def _require(self, restaurant_id: RestaurantId) -> Restaurant:
        restaurant = await self.restaurant_repository.find_by_id(restaurant_id)
        if restaurant is None:
            logfire.warn("Vote on unknown restaurant", restaurant_id=str(restaurant_id))
            raise NotFoundError("Restaurant", str(restaurant_id))
        return restaurant
