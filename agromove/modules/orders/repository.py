"""Repository protocol for orders."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from agromove.db.models import Order as OrderModel


class OrderRepository(Protocol):
    async def count_by_status(self, statuses: Iterable[str]) -> int:
        ...

    async def list_by_status(self, statuses: Iterable[str], *, offset: int, limit: int) -> Sequence[OrderModel]:
        ...

    async def get_order(self, order_id: str) -> OrderModel | None:
        ...

    async def save(self, order: OrderModel) -> OrderModel:
        ...
