"""Notification domain exports"""

from .exceptions import NotificationNotFoundError
from .models import NotificationRecord
from .service import NotificationService

__all__ = [
    "NotificationNotFoundError",
    "NotificationRecord",
    "NotificationService",
]
