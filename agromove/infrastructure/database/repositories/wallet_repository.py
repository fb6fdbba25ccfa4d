"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, select, update
from sqlalchemy.exc import IntegrityError

from agromove.db.models import Wallet, WalletTransaction
from agromove.modules.common import AsyncRepository


class SqlWalletRepository(AsyncRepository[Wallet]):
    async def get_wallet_for_user(self, user_id: str) -> Wallet | None:
        stmt = (
            select(Wallet)
            .where(Wallet.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create_wallet(self, user_id: str) -> Wallet:
        wallet = Wallet(user_id=user_id, balance_cents=0)
        try:
            await self.add(wallet)
        except IntegrityError:
            await self.session.rollback()
            wallet = await self.get_wallet_for_user(user_id)
            if wallet is None:
                raise
        await self.session.refresh(wallet)
        return wallet

    async def apply_delta(self, wallet_id: str, delta_cents: int) -> int | None:
        new_balance = Wallet.balance_cents + delta_cents
        stmt = (
            update(Wallet)
            .where(Wallet.id == wallet_id, new_balance >= 0)
            .values(balance_cents=new_balance)
            .returning(Wallet.balance_cents)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_transaction(
        self,
        *,
        wallet_id: str,
        amount_cents: int,
        direction: str,
        description: str,
        status: str,
        timestamp: datetime,
    ) -> WalletTransaction:
        tx = WalletTransaction(
            wallet_id=wallet_id,
            amount_cents=amount_cents,
            direction=direction,
            description=description,
            status=status,
            timestamp=timestamp,
        )
        return await self.add(tx)

    async def get_transaction(self, transaction_id: int) -> WalletTransaction | None:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.id == transaction_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def mark_transaction_status(self, transaction_id: int, status: str) -> WalletTransaction | None:
        stmt = (
            update(WalletTransaction)
            .where(WalletTransaction.id == transaction_id, WalletTransaction.status == "PENDING")
            .values(status=status)
            .returning(WalletTransaction.id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is None:
            return None
        return await self.get_transaction(transaction_id)

    async def list_transactions(self, wallet_id: str, limit: int | None = None) -> Sequence[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.wallet_id == wallet_id)
            .order_by(desc(WalletTransaction.timestamp), desc(WalletTransaction.id))
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()
