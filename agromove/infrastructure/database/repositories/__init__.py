"""SQLAlchemy-backed repository implementations."""

from .notification_repository import SqlNotificationRepository
from .order_repository import SqlOrderRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlNotificationRepository",
    "SqlOrderRepository",
    "SqlWalletRepository",
]
