"""Wallet domain service.

Every balance change is paired with exactly one ledger entry inside the
caller's session; the request's unit of work commits or rolls back both.
Bank-transfer funding is recorded as PENDING and only reaches the balance
through ``settle_funding``, so the balance always equals successful credits
minus successful debits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Union

from sqlalchemy.ext.asyncio import AsyncSession

from agromove.core.errors import InsufficientFundsError, InvalidArgumentError
from agromove.core.money import from_cents, to_cents
from agromove.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel
from agromove.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

from .exceptions import TransactionNotFoundError, TransactionNotPendingError, WalletNotFoundError
from .models import (
    BANK_TRANSFER_FUNDING_DESCRIPTION,
    CARD_FUNDING_DESCRIPTION,
    FundingMethod,
    TransactionDirection,
    TransactionStatus,
    WalletTransactionRecord,
    WalletView,
)
from .repository import WalletRepository

logger = logging.getLogger(__name__)

DEFAULT_RECENT_TRANSACTIONS = 50


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    recent_limit: int = DEFAULT_RECENT_TRANSACTIONS
    clock: Callable[[], datetime] = field(default=_utcnow)

    @classmethod
    def with_session(cls, session: AsyncSession, recent_limit: int = DEFAULT_RECENT_TRANSACTIONS) -> "WalletService":
        return cls(SqlWalletRepository(session), recent_limit=recent_limit)

    async def get_wallet(self, user_id: str) -> WalletView:
        wallet = await self._require_wallet(user_id)
        return await self._build_view(wallet)

    async def get_balance(self, user_id: str) -> Decimal:
        wallet = await self._require_wallet(user_id)
        return from_cents(wallet.balance_cents)

    async def list_transactions(self, user_id: str) -> list[WalletTransactionRecord]:
        """Full history, newest first; a user without a wallet simply has none."""
        wallet = await self.repository.get_wallet_for_user(user_id)
        if wallet is None:
            return []
        rows = await self.repository.list_transactions(wallet.id)
        return [self._to_transaction(row) for row in rows]

    async def fund(
        self,
        user_id: str,
        amount: Decimal,
        method: Union[FundingMethod, str] = FundingMethod.CARD,
    ) -> WalletView:
        amount_cents = self._validate_amount(amount)
        method = self._parse_method(method)
        wallet = await self._require_wallet(user_id)

        if method is FundingMethod.BANK_TRANSFER:
            status = TransactionStatus.PENDING
            description = BANK_TRANSFER_FUNDING_DESCRIPTION
        else:
            status = TransactionStatus.SUCCESS
            description = CARD_FUNDING_DESCRIPTION
            await self.repository.apply_delta(wallet.id, amount_cents)

        tx = await self.repository.add_transaction(
            wallet_id=wallet.id,
            amount_cents=amount_cents,
            direction=TransactionDirection.CREDIT.value,
            description=description,
            status=status.value,
            timestamp=self.clock(),
        )
        logger.info(
            "Wallet %s funded with %s via %s (transaction %s, %s)",
            wallet.id,
            from_cents(amount_cents),
            method.value,
            tx.id,
            status.value,
        )
        return await self.get_wallet(user_id)

    async def debit(self, user_id: str, amount: Decimal, description: str | None) -> WalletView:
        amount_cents = self._validate_amount(amount)
        if description is None or not description.strip():
            raise InvalidArgumentError("Transaction description is required")
        wallet = await self._require_wallet(user_id)

        if wallet.balance_cents < amount_cents:
            self._reject_debit(wallet, amount_cents)
        # The guarded update is the real check; the read above can be stale.
        new_balance = await self.repository.apply_delta(wallet.id, -amount_cents)
        if new_balance is None:
            self._reject_debit(wallet, amount_cents)

        tx = await self.repository.add_transaction(
            wallet_id=wallet.id,
            amount_cents=amount_cents,
            direction=TransactionDirection.DEBIT.value,
            description=description.strip(),
            status=TransactionStatus.SUCCESS.value,
            timestamp=self.clock(),
        )
        logger.info("Wallet %s debited %s (transaction %s)", wallet.id, from_cents(amount_cents), tx.id)
        return await self.get_wallet(user_id)

    async def settle_funding(self, transaction_id: int, succeeded: bool = True) -> WalletTransactionRecord:
        """Confirm or reject a pending bank-transfer credit."""
        tx = await self.repository.get_transaction(transaction_id)
        if tx is None:
            raise TransactionNotFoundError()
        if tx.direction != TransactionDirection.CREDIT.value or tx.status != TransactionStatus.PENDING.value:
            raise TransactionNotPendingError("Only pending credit transactions can be settled")

        outcome = TransactionStatus.SUCCESS if succeeded else TransactionStatus.FAILED
        settled = await self.repository.mark_transaction_status(transaction_id, outcome.value)
        if settled is None:
            raise TransactionNotPendingError("Transaction has already been settled")
        if succeeded:
            await self.repository.apply_delta(settled.wallet_id, settled.amount_cents)
        logger.info("Transaction %s settled as %s", transaction_id, outcome.value)
        return self._to_transaction(settled)

    async def provision_wallet(self, user_id: str) -> WalletView:
        wallet = await self.repository.get_wallet_for_user(user_id)
        if wallet is None:
            wallet = await self.repository.create_wallet(user_id)
            logger.info("Provisioned wallet %s for user %s", wallet.id, user_id)
        return await self._build_view(wallet)

    async def _require_wallet(self, user_id: str) -> WalletModel:
        wallet = await self.repository.get_wallet_for_user(user_id)
        if wallet is None:
            raise WalletNotFoundError()
        return wallet

    async def _build_view(self, wallet: WalletModel) -> WalletView:
        rows = await self.repository.list_transactions(wallet.id, self.recent_limit)
        return WalletView(
            id=wallet.id,
            user_id=wallet.user_id,
            balance=from_cents(wallet.balance_cents),
            created_at=wallet.created_at,
            transactions=[self._to_transaction(row) for row in rows],
        )

    @staticmethod
    def _validate_amount(amount: Decimal) -> int:
        amount_cents = to_cents(amount)
        if amount_cents <= 0:
            raise InvalidArgumentError("Amount must be greater than zero")
        return amount_cents

    @staticmethod
    def _parse_method(method: Union[FundingMethod, str]) -> FundingMethod:
        if isinstance(method, FundingMethod):
            return method
        try:
            return FundingMethod((method or FundingMethod.CARD.value).strip().upper())
        except ValueError as exc:
            raise InvalidArgumentError("Funding method must be CARD or BANK_TRANSFER") from exc

    @staticmethod
    def _reject_debit(wallet: WalletModel, amount_cents: int) -> None:
        logger.warning(
            "Debit of %s rejected for wallet %s: insufficient balance",
            from_cents(amount_cents),
            wallet.id,
        )
        raise InsufficientFundsError("Insufficient wallet balance")

    @staticmethod
    def _to_transaction(model: WalletTransactionModel) -> WalletTransactionRecord:
        return WalletTransactionRecord(
            id=model.id,
            wallet_id=model.wallet_id,
            amount=from_cents(model.amount_cents),
            direction=TransactionDirection(model.direction),
            description=model.description,
            status=TransactionStatus(model.status),
            timestamp=model.timestamp,
        )
