"""Domain service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agromove.core.config import get_settings
from agromove.modules.notifications import NotificationService
from agromove.modules.orders import OrderLifecycleService, get_policy
from agromove.modules.wallets import WalletService

from .database import get_db_session


def get_wallet_service(db: AsyncSession = Depends(get_db_session)) -> WalletService:
    settings = get_settings()
    return WalletService.with_session(db, recent_limit=settings.wallet.recent_transactions_limit)


def get_order_service(db: AsyncSession = Depends(get_db_session)) -> OrderLifecycleService:
    settings = get_settings()
    return OrderLifecycleService.with_session(
        db,
        policy=get_policy(settings.orders.transition_policy),
        default_page_size=settings.orders.default_page_size,
        max_page_size=settings.orders.max_page_size,
    )


def get_notification_service(db: AsyncSession = Depends(get_db_session)) -> NotificationService:
    return NotificationService.with_session(db)


__all__ = [
    "get_notification_service",
    "get_order_service",
    "get_wallet_service",
]
