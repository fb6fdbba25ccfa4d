"""Repository protocol for wallet operations."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from agromove.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel


class WalletRepository(Protocol):
    async def get_wallet_for_user(self, user_id: str) -> WalletModel | None:
        ...

    async def create_wallet(self, user_id: str) -> WalletModel:
        ...

    async def apply_delta(self, wallet_id: str, delta_cents: int) -> int | None:
        """Shift the balance, returning the new value or ``None`` if it would go negative."""
        ...

    async def add_transaction(
        self,
        *,
        wallet_id: str,
        amount_cents: int,
        direction: str,
        description: str,
        status: str,
        timestamp: datetime,
    ) -> WalletTransactionModel:
        ...

    async def get_transaction(self, transaction_id: int) -> WalletTransactionModel | None:
        ...

    async def mark_transaction_status(self, transaction_id: int, status: str) -> WalletTransactionModel | None:
        """Move a PENDING entry to ``status``; ``None`` if it was no longer pending."""
        ...

    async def list_transactions(
        self, wallet_id: str, limit: int | None = None
    ) -> Sequence[WalletTransactionModel]:
        ...
