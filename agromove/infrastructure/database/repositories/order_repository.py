"""SQLAlchemy implementation of the order repository."""

from __future__ import annotations

from typing import Iterable, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.orm import selectinload

from agromove.db.models import Order
from agromove.modules.common import AsyncRepository

_ORDER_RELATIONS = (
    selectinload(Order.shipper),
    selectinload(Order.driver),
    selectinload(Order.items),
)


class SqlOrderRepository(AsyncRepository[Order]):
    conflict_message = "Order was updated by another request, please retry"

    async def count_by_status(self, statuses: Iterable[str]) -> int:
        stmt = select(func.count()).select_from(Order).where(Order.status.in_(list(statuses)))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def list_by_status(self, statuses: Iterable[str], *, offset: int, limit: int) -> Sequence[Order]:
        stmt = (
            select(Order)
            .where(Order.status.in_(list(statuses)))
            .options(*_ORDER_RELATIONS)
            .order_by(desc(Order.created_at), desc(Order.id))
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_order(self, order_id: str) -> Order | None:
        stmt = (
            select(Order)
            .where(Order.id == order_id)
            .options(*_ORDER_RELATIONS)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def save(self, order: Order) -> Order:
        return await self.add(order)
