"""Comment log on PostgreSQL."""

from typing import Dict, List, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ranker.domain.model import Comment
from ranker.domain.repository import CommentRepository
from ranker.domain.value import RestaurantId
from ranker.persistence.mappers import comment_to_dict, row_to_comment
from ranker.persistence.tables import comments_table

_OLDEST_FIRST = comments_table.c.created_at


class PostgresCommentRepository(CommentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_restaurant(self, restaurant_id: RestaurantId) -> List[Comment]:
        result = await self.session.execute(
            select(comments_table)
            .where(comments_table.c.restaurant_id == restaurant_id)
            .order_by(_OLDEST_FIRST)
        )
        return [row_to_comment(row._asdict()) for row in result]

    async def find_by_restaurants(
        self, restaurant_ids: Sequence[RestaurantId]
    ) -> Dict[RestaurantId, List[Comment]]:
        """One query for the whole ranking page."""
        grouped: Dict[RestaurantId, List[Comment]] = {rid: [] for rid in restaurant_ids}
        if not grouped:
            return grouped

        result = await self.session.execute(
            select(comments_table)
            .where(comments_table.c.restaurant_id.in_(list(grouped)))
            .order_by(_OLDEST_FIRST)
        )
        for row in result:
            comment = row_to_comment(row._asdict())
            grouped[comment.restaurant_id].append(comment)
        return grouped

    async def save(self, comment: Comment) -> Comment:
        await self.session.execute(insert(comments_table).values(**comment_to_dict(comment)))
        await self.session.flush()
        return comment

    async def count_by_restaurant(self, restaurant_id: RestaurantId) -> int:
        count = await self.session.scalar(
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.restaurant_id == restaurant_id)
        )
        return count or 0
