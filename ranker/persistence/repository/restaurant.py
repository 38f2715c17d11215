"""Restaurant storage on PostgreSQL."""

import logfire
from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ranker.domain.model import Restaurant
from ranker.domain.repository import RestaurantRepository
from ranker.domain.value import RestaurantId, VoteDelta
from ranker.persistence.mappers import restaurant_to_dict, row_to_restaurant
from ranker.persistence.tables import restaurants_table

_t = restaurants_table

# Highest score first; equal scores keep insertion order
_RANKING = (_t.c.score.desc(), _t.c.position.asc())


class PostgresRestaurantRepository(RestaurantRepository):
    """Counters are only ever changed in-database with guarded UPDATEs."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, restaurant_id: RestaurantId) -> Restaurant | None:
        result = await self.session.execute(select(_t).where(_t.c.id == restaurant_id))
        row = result.first()
        return row_to_restaurant(row._asdict()) if row else None

    async def find_all_ranked(self) -> list[Restaurant]:
        with logfire.span("restaurant_repository.find_all_ranked"):
            result = await self.session.execute(select(_t).order_by(*_RANKING))
            ranked = [row_to_restaurant(row._asdict()) for row in result]
            logfire.info("Loaded ranking", count=len(ranked))
            return ranked

    async def count(self) -> int:
        return await self.session.scalar(select(func.count()).select_from(_t)) or 0

    async def save(self, restaurant: Restaurant) -> Restaurant:
        """Insert, or overwrite every column of an existing row with the same ID."""
        values = restaurant_to_dict(restaurant)
        stmt = insert(_t).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[_t.c.id],
            set_={k: stmt.excluded[k] for k in values if k != "id"},
        )
        with logfire.span("restaurant_repository.save", restaurant_id=str(restaurant.id)):
            await self.session.execute(stmt)
            await self.session.flush()
        return restaurant

    async def delete_all(self) -> int:
        # comments cascade via the foreign key
        result = await self.session.execute(delete(_t))
        await self.session.flush()
        return result.rowcount or 0

    async def apply_vote_delta(
        self, restaurant_id: RestaurantId, delta: VoteDelta
    ) -> Restaurant | None:
        """Add ``delta`` to the counters in one ``UPDATE ... RETURNING``.

        The row lock taken by the UPDATE serializes concurrent votes. Rows
        whose counters would go negative are filtered out by the WHERE
        clause, so None means "unknown restaurant or refused delta".
        """
        stmt = (
            update(_t)
            .where(
                _t.c.id == restaurant_id,
                _t.c.upvotes + delta.upvotes >= 0,
                _t.c.downvotes + delta.downvotes >= 0,
            )
            .values(
                upvotes=_t.c.upvotes + delta.upvotes,
                downvotes=_t.c.downvotes + delta.downvotes,
                score=_t.c.score + delta.score,
                updated_at=func.now(),
            )
            .returning(_t)
        )
        with logfire.span(
            "restaurant_repository.apply_vote_delta",
            restaurant_id=str(restaurant_id),
            delta_upvotes=delta.upvotes,
            delta_downvotes=delta.downvotes,
        ):
            row = (await self.session.execute(stmt)).first()
            await self.session.flush()

        if row is None:
            logfire.warn("Vote delta not applied", restaurant_id=str(restaurant_id))
            return None
        return row_to_restaurant(row._asdict())

    async def increment_comment_count(self, restaurant_id: RestaurantId) -> None:
        await self.session.execute(
            update(_t)
            .where(_t.c.id == restaurant_id)
            .values(comment_count=_t.c.comment_count + 1, updated_at=func.now())
        )
        await self.session.flush()
