"""Order domain exports"""

from .exceptions import InvalidOrderStatusError, InvalidStatusTransitionError, OrderNotFoundError
from .models import ACTIVE_STATUSES, OrderDetail, OrderPage, OrderStatus, OrderSummary, StatusChange, UserSummary
from .service import OrderLifecycleService
from .transitions import AnyToAnyPolicy, StrictTransitionPolicy, TransitionPolicy, get_policy

__all__ = [
    "ACTIVE_STATUSES",
    "AnyToAnyPolicy",
    "InvalidOrderStatusError",
    "InvalidStatusTransitionError",
    "OrderDetail",
    "OrderLifecycleService",
    "OrderNotFoundError",
    "OrderPage",
    "OrderStatus",
    "OrderSummary",
    "StatusChange",
    "StrictTransitionPolicy",
    "TransitionPolicy",
    "UserSummary",
    "get_policy",
]
