"""SQLAlchemy implementation of the notification repository."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, select

from agromove.db.models import Notification
from agromove.modules.common import AsyncRepository


class SqlNotificationRepository(AsyncRepository[Notification]):
    async def create(
        self,
        *,
        user_id: str,
        title: str,
        message: str,
        type: str,
        related_order_id: str | None,
        created_at: datetime,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            related_order_id=related_order_id,
            is_read=False,
            created_at=created_at,
        )
        return await self.add(notification)

    async def list_for_user(self, user_id: str, *, unread_only: bool = False) -> Sequence[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))
        stmt = stmt.order_by(desc(Notification.created_at))
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def mark_read(self, user_id: str, notification_id: str) -> Notification | None:
        stmt = select(Notification).where(
            Notification.id == notification_id,
            Notification.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        notification = result.scalars().first()
        if notification is None:
            return None
        notification.is_read = True
        await self.flush()
        return notification
