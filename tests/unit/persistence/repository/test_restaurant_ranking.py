"""Unit tests for restaurant ranking and atomic vote deltas."""

import pytest

from ranker.domain.value import VoteDelta
from ranker.persistence.repository.inmemory import InMemoryRestaurantRepository
from tests.conftest import make_restaurant


class TestRestaurantRanking:
    """Unit tests for score ordering."""

    @pytest.mark.asyncio
    async def test_higher_score_ranks_first(self):
        """Score decides the order, not the raw upvote count."""
        # Arrange
        repo = InMemoryRestaurantRepository()
        many_votes = make_restaurant("Many Votes", upvotes=10, downvotes=9)
        few_votes = make_restaurant("Few Votes", upvotes=3)
        await repo.save(many_votes)
        await repo.save(few_votes)

        # Act
        ranked = await repo.find_all_ranked()

        # Assert
        assert [r.id for r in ranked] == [few_votes.id, many_votes.id]

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order(self):
        """Equal scores keep the order restaurants were added in."""
        repo = InMemoryRestaurantRepository()
        first = make_restaurant("First", upvotes=2, downvotes=1)
        second = make_restaurant("Second", upvotes=1)
        third = make_restaurant("Third", upvotes=5, downvotes=4)
        for restaurant in (first, second, third):
            await repo.save(restaurant)

        ranked = await repo.find_all_ranked()

        assert [r.id for r in ranked] == [first.id, second.id, third.id]

    @pytest.mark.asyncio
    async def test_vote_reorders_ranking(self):
        """A vote that changes the score moves the restaurant."""
        repo = InMemoryRestaurantRepository()
        leader = await repo.save(make_restaurant("Leader", upvotes=1))
        challenger = await repo.save(make_restaurant("Challenger", upvotes=1))

        await repo.apply_vote_delta(challenger.id, VoteDelta(upvotes=1))

        ranked = await repo.find_all_ranked()
        assert [r.id for r in ranked] == [challenger.id, leader.id]


class TestApplyVoteDelta:
    """Unit tests for the guarded counter update."""

    @pytest.mark.asyncio
    async def test_refuses_negative_counters(self):
        """A delta that would make a counter negative is not applied."""
        repo = InMemoryRestaurantRepository()
        restaurant = await repo.save(make_restaurant())

        result = await repo.apply_vote_delta(
            restaurant.id, VoteDelta(upvotes=-1, downvotes=1)
        )

        assert result is None
        stored = await repo.find_by_id(restaurant.id)
        assert stored.upvotes == 0
        assert stored.downvotes == 0

    @pytest.mark.asyncio
    async def test_missing_restaurant_returns_none(self):
        """Unknown restaurants are reported as None."""
        repo = InMemoryRestaurantRepository()
        ghost = make_restaurant("Ghost")

        assert await repo.apply_vote_delta(ghost.id, VoteDelta(upvotes=1)) is None
