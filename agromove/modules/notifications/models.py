"""Domain models for user notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

ORDER_UPDATE_TYPE = "ORDER_UPDATE"
ORDER_UPDATE_TITLE = "Order Status Update"


@dataclass(slots=True)
class NotificationRecord:
    id: str
    user_id: str
    title: str
    message: str
    type: str
    related_order_id: Optional[str]
    is_read: bool
    created_at: datetime
