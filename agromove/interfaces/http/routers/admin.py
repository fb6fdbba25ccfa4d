"""Administrative endpoints for shipment orders and funding settlement."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from agromove.core.security import CallerIdentity, get_current_admin
from agromove.interfaces.http.deps import get_db_session, get_order_service, get_wallet_service
from agromove.modules.orders import OrderLifecycleService
from agromove.modules.wallets import WalletService
from agromove.schemas import (
    AdminOrderDetailResponse,
    AdminOrderResponse,
    PaginatedOrderResponse,
    SettleFundingRequest,
    TransactionResponse,
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
)

router = APIRouter()


@router.get("/orders/active", response_model=PaginatedOrderResponse, summary="Active orders, newest first")
async def list_active_orders(
    page: int = Query(1, ge=1),
    size: Optional[int] = Query(None, ge=1),
    _: CallerIdentity = Depends(get_current_admin),
    service: OrderLifecycleService = Depends(get_order_service),
) -> PaginatedOrderResponse:
    result = await service.list_active_orders(page=page, size=size)
    return PaginatedOrderResponse(
        data=[AdminOrderResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        size=result.size,
    )


@router.get("/orders/{order_id}", response_model=AdminOrderDetailResponse, summary="Order detail")
async def get_order_detail(
    order_id: str = Path(...),
    _: CallerIdentity = Depends(get_current_admin),
    service: OrderLifecycleService = Depends(get_order_service),
) -> AdminOrderDetailResponse:
    detail = await service.get_order_detail(order_id)
    return AdminOrderDetailResponse.model_validate(detail)


@router.put("/orders/{order_id}/status", response_model=UpdateOrderStatusResponse, summary="Change order status")
async def update_order_status(
    payload: UpdateOrderStatusRequest,
    order_id: str = Path(...),
    _: CallerIdentity = Depends(get_current_admin),
    service: OrderLifecycleService = Depends(get_order_service),
    db: AsyncSession = Depends(get_db_session),
) -> UpdateOrderStatusResponse:
    change = await service.update_status(order_id, payload.status)
    await db.commit()
    return UpdateOrderStatusResponse(
        message="Order status updated and notification saved to database"
        if change.notification_id
        else "Order status updated",
        status=change.current,
    )


@router.post(
    "/wallet/transactions/{transaction_id}/settle",
    response_model=TransactionResponse,
    summary="Confirm or reject a pending bank-transfer funding",
)
async def settle_funding(
    payload: SettleFundingRequest,
    transaction_id: int = Path(...),
    _: CallerIdentity = Depends(get_current_admin),
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    record = await service.settle_funding(transaction_id, succeeded=payload.succeeded)
    await db.commit()
    return TransactionResponse.model_validate(record)
