"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.repository import RestaurantRepository
from ranker.domain.service import VoteService
from ranker.domain.value import RestaurantId, VoteAction
from tests.conftest import make_restaurant
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

UP = VoteAction.UPVOTE
DOWN = VoteAction.DOWNVOTE


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_fresh_upvote_increments_upvotes(self, unit_env):
        """A first upvote adds one upvote and one point."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant())

        # Act
        result = await vote_service.cast_vote(restaurant.id, UP)

        # Assert
        assert result.upvotes == 1
        assert result.downvotes == 0
        assert result.score == 1
        stored = await restaurant_repo.find_by_id(restaurant.id)
        assert stored.score == 1

    @pytest.mark.asyncio
    async def test_fresh_downvote_increments_downvotes(self, unit_env):
        """A first downvote adds one downvote and removes a point."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant())

        result = await vote_service.cast_vote(restaurant.id, DOWN)

        assert result.upvotes == 0
        assert result.downvotes == 1
        assert result.score == -1

    @pytest.mark.asyncio
    async def test_switch_upvote_to_downvote(self, unit_env):
        """Switching moves a vote from one counter to the other."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant(upvotes=3, downvotes=1))

        result = await vote_service.cast_vote(restaurant.id, DOWN, previous=UP)

        assert result.upvotes == 2
        assert result.downvotes == 2
        assert result.score == 0

    @pytest.mark.asyncio
    async def test_switch_downvote_to_upvote(self, unit_env):
        """Switching the other way gains two points."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant(downvotes=1))

        result = await vote_service.cast_vote(restaurant.id, UP, previous=DOWN)

        assert result.upvotes == 1
        assert result.downvotes == 0
        assert result.score == 1

    @pytest.mark.asyncio
    async def test_repeated_vote_changes_nothing(self, unit_env):
        """Repeating the previous vote returns current state unchanged."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant(upvotes=5, downvotes=2))

        result = await vote_service.cast_vote(restaurant.id, UP, previous=UP)

        assert result.upvotes == 5
        assert result.downvotes == 2
        assert result.score == 3

    @pytest.mark.asyncio
    async def test_switch_without_counted_vote_is_refused(self, unit_env):
        """A switch that would drive a counter negative is refused."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant())

        with pytest.raises(ValidationError, match="Cannot switch from upvote"):
            await vote_service.cast_vote(restaurant.id, DOWN, previous=UP)

        stored = await restaurant_repo.find_by_id(restaurant.id)
        assert stored.upvotes == 0
        assert stored.downvotes == 0

    @pytest.mark.asyncio
    async def test_nonexistent_restaurant_raises_not_found(self, unit_env):
        """Voting on an unknown restaurant raises NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(RestaurantId(uuid4()), UP)

    @pytest.mark.asyncio
    async def test_nonexistent_restaurant_leaves_others_untouched(self, unit_env):
        """A failed vote does not touch any stored restaurant."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        await restaurant_repo.save(make_restaurant("First", upvotes=2))
        await restaurant_repo.save(make_restaurant("Second", downvotes=1))
        before = await restaurant_repo.find_all_ranked()

        for action, previous in [(UP, None), (DOWN, UP), (UP, DOWN)]:
            with pytest.raises(NotFoundError):
                await vote_service.cast_vote(RestaurantId(uuid4()), action, previous)

        assert await restaurant_repo.find_all_ranked() == before

    @pytest.mark.asyncio
    async def test_repeated_vote_on_nonexistent_restaurant_raises(self, unit_env):
        """The no-op path still checks the restaurant exists."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(RestaurantId(uuid4()), DOWN, previous=DOWN)


class TestVoteSequences:
    """Counters stay consistent over sequences of votes."""

    @pytest.mark.asyncio
    async def test_client_sequence_keeps_invariants(self, unit_env):
        """One client toggling back and forth nets out to its last vote."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant())

        previous = None
        for action in [UP, DOWN, DOWN, UP, DOWN]:
            result = await vote_service.cast_vote(restaurant.id, action, previous)
            assert result.upvotes >= 0
            assert result.downvotes >= 0
            assert result.score == result.upvotes - result.downvotes
            previous = action

        assert result.upvotes == 0
        assert result.downvotes == 1
        assert result.score == -1

    @pytest.mark.asyncio
    async def test_concurrent_votes_are_all_counted(self, unit_env):
        """Concurrent fresh votes never lose an update."""
        vote_service = await unit_env.get(VoteService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        restaurant = await restaurant_repo.save(make_restaurant())

        await asyncio.gather(
            *[vote_service.cast_vote(restaurant.id, UP) for _ in range(10)],
            *[vote_service.cast_vote(restaurant.id, DOWN) for _ in range(4)],
        )

        stored = await restaurant_repo.find_by_id(restaurant.id)
        assert stored.upvotes == 10
        assert stored.downvotes == 4
        assert stored.score == 6
