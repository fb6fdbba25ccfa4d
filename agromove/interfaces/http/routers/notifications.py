"""Notification inbox for the authenticated caller."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agromove.core.security import CallerIdentity, get_current_user
from agromove.interfaces.http.deps import get_db_session, get_notification_service
from agromove.modules.notifications import NotificationService
from agromove.schemas import NotificationListResponse, NotificationResponse

router = APIRouter()


@router.get("", response_model=NotificationListResponse, summary="List own notifications")
async def list_notifications(
    unread_only: bool = False,
    caller: CallerIdentity = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    records = await service.list_for_user(caller.user_id, unread_only=unread_only)
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(record) for record in records]
    )


@router.post("/{notification_id}/read", response_model=NotificationResponse, summary="Mark a notification read")
async def mark_notification_read(
    notification_id: str,
    caller: CallerIdentity = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
    db: AsyncSession = Depends(get_db_session),
) -> NotificationResponse:
    record = await service.mark_read(caller.user_id, notification_id)
    await db.commit()
    return NotificationResponse.model_validate(record)
