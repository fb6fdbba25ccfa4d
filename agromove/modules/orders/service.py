"""Order lifecycle service: admin reads and the status-transition operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from agromove.core.errors import InvalidArgumentError
from agromove.core.money import from_cents
from agromove.db.models import Order as OrderModel, User as UserModel
from agromove.infrastructure.database.repositories.order_repository import SqlOrderRepository
from agromove.modules.notifications import NotificationService

from .exceptions import OrderNotFoundError
from .models import (
    ACTIVE_STATUSES,
    STATUS_TIMESTAMP_FIELDS,
    OrderDetail,
    OrderPage,
    OrderStatus,
    OrderSummary,
    StatusChange,
    UserSummary,
)
from .projections import marketplace_summary, parse_details, total_payable
from .repository import OrderRepository
from .transitions import AnyToAnyPolicy, TransitionPolicy, ensure_allowed

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class OrderLifecycleService:
    repository: OrderRepository
    notifications: NotificationService
    policy: TransitionPolicy = field(default_factory=AnyToAnyPolicy)
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = MAX_PAGE_SIZE
    clock: Callable[[], datetime] = field(default=_utcnow)

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        policy: TransitionPolicy | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "OrderLifecycleService":
        return cls(
            repository=SqlOrderRepository(session),
            notifications=NotificationService.with_session(session),
            policy=policy or AnyToAnyPolicy(),
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        )

    async def list_active_orders(self, page: int = 1, size: int | None = None) -> OrderPage:
        if size is None:
            size = self.default_page_size
        if page < 1:
            raise InvalidArgumentError("Page must be 1 or greater")
        if size < 1 or size > self.max_page_size:
            raise InvalidArgumentError(f"Size must be between 1 and {self.max_page_size}")

        statuses = [status.value for status in ACTIVE_STATUSES]
        total = await self.repository.count_by_status(statuses)
        rows = await self.repository.list_by_status(statuses, offset=(page - 1) * size, limit=size)
        return OrderPage(
            items=[self._to_summary(row) for row in rows],
            total=total,
            page=page,
            size=size,
        )

    async def get_order_detail(self, order_id: str) -> OrderDetail:
        order = await self.repository.get_order(order_id)
        if order is None:
            raise OrderNotFoundError()
        return self._to_detail(order)

    async def update_status(self, order_id: str, status_name: str) -> StatusChange:
        target = OrderStatus.parse(status_name)
        order = await self.repository.get_order(order_id)
        if order is None:
            raise OrderNotFoundError()

        previous = OrderStatus.parse(order.status)
        ensure_allowed(self.policy, previous, target)

        order.status = target.value
        timestamp_field = STATUS_TIMESTAMP_FIELDS.get(target)
        if timestamp_field is not None and getattr(order, timestamp_field) is None:
            setattr(order, timestamp_field, self.clock())
        await self.repository.save(order)

        change = StatusChange(order_id=order.id, previous=previous, current=target)
        if change.changed and order.shipper_id is not None:
            notification = await self.notifications.notify_status_change(order, target.display_name)
            change.notification_id = notification.id

        logger.info("Order %s status %s -> %s", order.id, previous.value, target.value)
        return change

    @staticmethod
    def _to_user(model: UserModel | None) -> UserSummary | None:
        if model is None:
            return None
        return UserSummary(id=model.id, name=model.name, phone=model.phone)

    @staticmethod
    def _sender_name(order: OrderModel) -> str | None:
        if order.sender_name:
            return order.sender_name
        return order.shipper.name if order.shipper is not None else None

    def _to_summary(self, order: OrderModel) -> OrderSummary:
        return OrderSummary(
            id=order.id,
            status=OrderStatus.parse(order.status),
            is_international=bool(order.is_international),
            pickup_location=order.pickup_location,
            destination=order.destination,
            produce_type=order.produce_type,
            weight=order.weight,
            box_size=order.box_size,
            special_instructions=order.special_instructions,
            receiver_name=order.receiver_name,
            receiver_phone=order.receiver_phone,
            sender_name=self._sender_name(order),
            estimated_cost=from_cents(order.estimated_cost_cents or 0),
            total_payable=total_payable(order),
            marketplace_summary=marketplace_summary(order),
            recommended_vehicle=order.recommended_vehicle,
            special_advice=order.special_advice,
            estimated_time=order.estimated_time,
            cargo_image_url=order.cargo_image_url,
            driver_name=order.driver.name if order.driver is not None else None,
            created_at=order.created_at,
            details=parse_details(order.details_json),
        )

    def _to_detail(self, order: OrderModel) -> OrderDetail:
        return OrderDetail(
            id=order.id,
            status=OrderStatus.parse(order.status),
            shipper=self._to_user(order.shipper),
            driver=self._to_user(order.driver),
            is_international=bool(order.is_international),
            pickup_location=order.pickup_location,
            destination=order.destination,
            produce_type=order.produce_type,
            weight=order.weight,
            box_size=order.box_size,
            special_instructions=order.special_instructions,
            receiver_name=order.receiver_name,
            receiver_phone=order.receiver_phone,
            sender_name=self._sender_name(order),
            estimated_cost=from_cents(order.estimated_cost_cents or 0),
            total_payable=total_payable(order),
            marketplace_summary=marketplace_summary(order),
            recommended_vehicle=order.recommended_vehicle or "",
            special_advice=order.special_advice or "",
            estimated_time=order.estimated_time or "",
            cargo_image_url=order.cargo_image_url,
            created_at=order.created_at,
            accepted_at=order.accepted_at,
            in_transit_at=order.in_transit_at,
            cleared_at=order.cleared_at,
            delivered_at=order.delivered_at,
            cancelled_at=order.cancelled_at,
            details=parse_details(order.details_json),
        )
