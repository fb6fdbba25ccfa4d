"""Wallet endpoints scoped to the authenticated caller."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agromove.core.security import CallerIdentity, get_current_user
from agromove.interfaces.http.deps import get_db_session, get_wallet_service
from agromove.modules.wallets import WalletService
from agromove.schemas import (
    BalanceResponse,
    DebitWalletRequest,
    FundWalletRequest,
    TransactionResponse,
    WalletResponse,
)

router = APIRouter()


@router.get("", response_model=WalletResponse, summary="Wallet with recent transactions")
async def get_wallet(
    caller: CallerIdentity = Depends(get_current_user),
    service: WalletService = Depends(get_wallet_service),
) -> WalletResponse:
    wallet = await service.get_wallet(caller.user_id)
    return WalletResponse.model_validate(wallet)


@router.get("/balance", response_model=BalanceResponse, summary="Wallet balance only")
async def get_balance(
    caller: CallerIdentity = Depends(get_current_user),
    service: WalletService = Depends(get_wallet_service),
) -> BalanceResponse:
    return BalanceResponse(balance=await service.get_balance(caller.user_id))


@router.get("/transactions", response_model=list[TransactionResponse], summary="Full transaction history")
async def list_transactions(
    caller: CallerIdentity = Depends(get_current_user),
    service: WalletService = Depends(get_wallet_service),
) -> list[TransactionResponse]:
    records = await service.list_transactions(caller.user_id)
    return [TransactionResponse.model_validate(record) for record in records]


@router.post("/fund", response_model=WalletResponse, summary="Credit the wallet")
async def fund_wallet(
    payload: FundWalletRequest,
    caller: CallerIdentity = Depends(get_current_user),
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    wallet = await service.fund(caller.user_id, payload.amount, payload.method)
    await db.commit()
    return WalletResponse.model_validate(wallet)


@router.post("/debit", response_model=WalletResponse, summary="Debit the wallet")
async def debit_wallet(
    payload: DebitWalletRequest,
    caller: CallerIdentity = Depends(get_current_user),
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    wallet = await service.debit(caller.user_id, payload.amount, payload.description)
    await db.commit()
    return WalletResponse.model_validate(wallet)
