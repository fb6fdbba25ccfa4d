"""Notification records created as side effects of order changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from agromove.db.models import Notification as NotificationModel, Order as OrderModel
from agromove.infrastructure.database.repositories.notification_repository import SqlNotificationRepository

from .exceptions import NotificationNotFoundError
from .models import ORDER_UPDATE_TITLE, ORDER_UPDATE_TYPE, NotificationRecord
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class NotificationService:
    repository: NotificationRepository
    clock: Callable[[], datetime] = field(default=_utcnow)

    @classmethod
    def with_session(cls, session: AsyncSession) -> "NotificationService":
        return cls(SqlNotificationRepository(session))

    async def notify_status_change(self, order: OrderModel, status_label: str) -> NotificationRecord:
        """Tell the order's shipper that the status moved to ``status_label``."""
        cargo = order.produce_type or "cargo"
        model = await self.repository.create(
            user_id=order.shipper_id,
            title=ORDER_UPDATE_TITLE,
            message=f"Your order for {cargo} is now {status_label}.",
            type=ORDER_UPDATE_TYPE,
            related_order_id=order.id,
            created_at=self.clock(),
        )
        logger.info("Notification %s saved for shipper %s - order %s", model.id, order.shipper_id, order.id)
        return self._to_domain(model)

    async def list_for_user(self, user_id: str, unread_only: bool = False) -> list[NotificationRecord]:
        rows = await self.repository.list_for_user(user_id, unread_only=unread_only)
        return [self._to_domain(row) for row in rows]

    async def mark_read(self, user_id: str, notification_id: str) -> NotificationRecord:
        model = await self.repository.mark_read(user_id, notification_id)
        if model is None:
            raise NotificationNotFoundError()
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: NotificationModel) -> NotificationRecord:
        return NotificationRecord(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=model.type,
            related_order_id=model.related_order_id,
            is_read=model.is_read,
            created_at=model.created_at,
        )
