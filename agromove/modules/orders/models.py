"""Domain models for the order lifecycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from .exceptions import InvalidOrderStatusError


class OrderStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    IN_TRANSIT = "InTransit"
    CLEARED = "Cleared"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, name: str | None) -> "OrderStatus":
        """Resolve a status name case-insensitively, e.g. ``"intransit"``."""
        if name is not None:
            wanted = name.strip().lower()
            for status in cls:
                if status.value.lower() == wanted:
                    return status
        raise InvalidOrderStatusError("Invalid status")

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ")


ACTIVE_STATUSES: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.ACCEPTED,
    OrderStatus.IN_TRANSIT,
    OrderStatus.CLEARED,
)

# Pending has no timestamp of its own; it is the creation state.
STATUS_TIMESTAMP_FIELDS: dict[OrderStatus, str] = {
    OrderStatus.ACCEPTED: "accepted_at",
    OrderStatus.IN_TRANSIT: "in_transit_at",
    OrderStatus.CLEARED: "cleared_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.CANCELLED: "cancelled_at",
}


@dataclass(slots=True)
class UserSummary:
    id: str
    name: str
    phone: Optional[str]


@dataclass(slots=True)
class OrderSummary:
    id: str
    status: OrderStatus
    is_international: bool
    pickup_location: Optional[str]
    destination: Optional[str]
    produce_type: Optional[str]
    weight: Optional[str]
    box_size: Optional[str]
    special_instructions: Optional[str]
    receiver_name: Optional[str]
    receiver_phone: Optional[str]
    sender_name: Optional[str]
    estimated_cost: Decimal
    total_payable: Decimal
    marketplace_summary: str
    recommended_vehicle: Optional[str]
    special_advice: Optional[str]
    estimated_time: Optional[str]
    cargo_image_url: Optional[str]
    driver_name: Optional[str]
    created_at: Optional[datetime]
    details: Any = field(default_factory=dict)


@dataclass(slots=True)
class OrderDetail:
    id: str
    status: OrderStatus
    shipper: Optional[UserSummary]
    driver: Optional[UserSummary]
    is_international: bool
    pickup_location: Optional[str]
    destination: Optional[str]
    produce_type: Optional[str]
    weight: Optional[str]
    box_size: Optional[str]
    special_instructions: Optional[str]
    receiver_name: Optional[str]
    receiver_phone: Optional[str]
    sender_name: Optional[str]
    estimated_cost: Decimal
    total_payable: Decimal
    marketplace_summary: str
    recommended_vehicle: str
    special_advice: str
    estimated_time: str
    cargo_image_url: Optional[str]
    created_at: Optional[datetime]
    accepted_at: Optional[datetime]
    in_transit_at: Optional[datetime]
    cleared_at: Optional[datetime]
    delivered_at: Optional[datetime]
    cancelled_at: Optional[datetime]
    details: Any = field(default_factory=dict)


@dataclass(slots=True)
class OrderPage:
    items: list[OrderSummary]
    total: int
    page: int
    size: int


@dataclass(slots=True)
class StatusChange:
    order_id: str
    previous: OrderStatus
    current: OrderStatus
    notification_id: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.previous is not self.current
