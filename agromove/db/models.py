"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from agromove.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), nullable=False)
    phone = Column(String(30))
    email = Column(String(100), unique=True)
    role = Column(String(20), nullable=False, default="SHIPPER")
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, unique=True, index=True)
    balance_cents = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User")
    transactions = relationship("WalletTransaction", back_populates="wallet", cascade="all, delete-orphan")

    __table_args__ = (CheckConstraint("balance_cents >= 0", name="ck_wallets_balance_non_negative"),)


class WalletTransaction(Base):
    __tablename__ = "wallet_transactions"

    # Integer key doubles as insertion order when timestamps tie.
    id = Column(Integer, primary_key=True, autoincrement=True)
    wallet_id = Column(String(36), ForeignKey("wallets.id"), nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)
    direction = Column(String(10), nullable=False)  # CREDIT, DEBIT
    description = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default="SUCCESS")  # PENDING, SUCCESS, FAILED
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)

    wallet = relationship("Wallet", back_populates="transactions")

    __table_args__ = (CheckConstraint("amount_cents > 0", name="ck_wallet_transactions_amount_positive"),)


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    shipper_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    driver_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    is_international = Column(Boolean, nullable=False, default=False)
    pickup_location = Column(String(255))
    destination = Column(String(255))
    produce_type = Column(String(100))
    weight = Column(String(50))
    box_size = Column(String(50))
    special_instructions = Column(Text)
    receiver_name = Column(String(100))
    receiver_phone = Column(String(30))
    sender_name = Column(String(100))
    estimated_cost_cents = Column(Integer, nullable=False, default=0)
    recommended_vehicle = Column(String(100))
    special_advice = Column(Text)
    estimated_time = Column(String(100))
    cargo_image_url = Column(String(500))
    details_json = Column(Text)
    status = Column(String(20), nullable=False, default="Pending", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    accepted_at = Column(DateTime(timezone=True))
    in_transit_at = Column(DateTime(timezone=True))
    cleared_at = Column(DateTime(timezone=True))
    delivered_at = Column(DateTime(timezone=True))
    cancelled_at = Column(DateTime(timezone=True))
    version = Column(Integer, nullable=False)

    shipper = relationship("User", foreign_keys=[shipper_id])
    driver = relationship("User", foreign_keys=[driver_id])
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __mapper_args__ = {"version_id_col": version}


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    product_name = Column(String(150), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    price_at_purchase_cents = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="items")


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(150), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), nullable=False)
    related_order_id = Column(String(36), ForeignKey("orders.id"), nullable=True, index=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
