"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionDirection(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class FundingMethod(str, Enum):
    CARD = "CARD"
    BANK_TRANSFER = "BANK_TRANSFER"


CARD_FUNDING_DESCRIPTION = "Card Funding"
BANK_TRANSFER_FUNDING_DESCRIPTION = "Bank Transfer Funding"


@dataclass(slots=True)
class WalletTransactionRecord:
    id: int
    wallet_id: str
    amount: Decimal
    direction: TransactionDirection
    description: str
    status: TransactionStatus
    timestamp: datetime


@dataclass(slots=True)
class WalletView:
    id: str
    user_id: str
    balance: Decimal
    created_at: Optional[datetime]
    transactions: list[WalletTransactionRecord] = field(default_factory=list)
