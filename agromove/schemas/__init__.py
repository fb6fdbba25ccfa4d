"""Pydantic schemas used across the project.

Wire names are camelCase; Python attributes stay snake_case.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from agromove.modules.orders import OrderStatus
from agromove.modules.wallets import FundingMethod, TransactionDirection, TransactionStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- wallet -----------------------------------------------------------------


class FundWalletRequest(CamelModel):
    amount: Decimal
    method: FundingMethod = FundingMethod.CARD

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


class DebitWalletRequest(CamelModel):
    amount: Decimal
    description: str = ""


class SettleFundingRequest(CamelModel):
    succeeded: bool = True


class TransactionResponse(CamelModel):
    id: int
    amount: Decimal
    direction: TransactionDirection
    description: str
    status: TransactionStatus
    timestamp: datetime


class WalletResponse(CamelModel):
    id: str
    balance: Decimal
    created_at: Optional[datetime] = None
    transactions: list[TransactionResponse] = Field(default_factory=list)


class BalanceResponse(CamelModel):
    balance: Decimal


# --- orders -----------------------------------------------------------------


class UserSummaryResponse(CamelModel):
    id: str
    name: str
    phone: Optional[str] = None


class AdminOrderResponse(CamelModel):
    id: str
    status: OrderStatus
    is_international: bool
    pickup_location: Optional[str] = None
    destination: Optional[str] = None
    produce_type: Optional[str] = None
    weight: Optional[str] = None
    box_size: Optional[str] = None
    special_instructions: Optional[str] = None
    receiver_name: Optional[str] = None
    receiver_phone: Optional[str] = None
    sender_name: Optional[str] = None
    estimated_cost: Decimal
    total_payable: Decimal
    marketplace_summary: str
    recommended_vehicle: Optional[str] = None
    special_advice: Optional[str] = None
    estimated_time: Optional[str] = None
    cargo_image_url: Optional[str] = None
    driver_name: Optional[str] = None
    created_at: Optional[datetime] = None
    details: Any = Field(default_factory=dict)


class AdminOrderDetailResponse(CamelModel):
    id: str
    status: OrderStatus
    shipper: Optional[UserSummaryResponse] = None
    driver: Optional[UserSummaryResponse] = None
    is_international: bool
    pickup_location: Optional[str] = None
    destination: Optional[str] = None
    produce_type: Optional[str] = None
    weight: Optional[str] = None
    box_size: Optional[str] = None
    special_instructions: Optional[str] = None
    receiver_name: Optional[str] = None
    receiver_phone: Optional[str] = None
    sender_name: Optional[str] = None
    estimated_cost: Decimal
    total_payable: Decimal
    marketplace_summary: str
    recommended_vehicle: str = ""
    special_advice: str = ""
    estimated_time: str = ""
    cargo_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None
    in_transit_at: Optional[datetime] = None
    cleared_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    details: Any = Field(default_factory=dict)


class PaginatedOrderResponse(CamelModel):
    data: list[AdminOrderResponse] = Field(default_factory=list)
    total: int
    page: int
    size: int


class UpdateOrderStatusRequest(CamelModel):
    status: str


class UpdateOrderStatusResponse(CamelModel):
    message: str
    status: OrderStatus


# --- notifications ----------------------------------------------------------


class NotificationResponse(CamelModel):
    id: str
    title: str
    message: str
    type: str
    related_order_id: Optional[str] = None
    is_read: bool
    created_at: datetime


class NotificationListResponse(CamelModel):
    notifications: list[NotificationResponse] = Field(default_factory=list)
