"""Repository protocol for notifications."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from agromove.db.models import Notification as NotificationModel


class NotificationRepository(Protocol):
    async def create(
        self,
        *,
        user_id: str,
        title: str,
        message: str,
        type: str,
        related_order_id: str | None,
        created_at: datetime,
    ) -> NotificationModel:
        ...

    async def list_for_user(self, user_id: str, *, unread_only: bool = False) -> Sequence[NotificationModel]:
        ...

    async def mark_read(self, user_id: str, notification_id: str) -> NotificationModel | None:
        ...
