from fastapi import APIRouter

from agromove.interfaces.http.routers import admin, notifications, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
    router.include_router(admin.router, prefix="/admin", tags=["admin"])
    return router


__all__ = [
    "create_api_router",
]
