"""Status transition policies.

Status changes used to be applied without looking at the current status. That
behaviour is kept as ``AnyToAnyPolicy`` and stays the default until product
signs off on the strict table below.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from .exceptions import InvalidStatusTransitionError
from .models import OrderStatus


class TransitionPolicy(Protocol):
    name: str

    def allows(self, current: OrderStatus, target: OrderStatus) -> bool:
        ...


class AnyToAnyPolicy:
    name = "any"

    def allows(self, current: OrderStatus, target: OrderStatus) -> bool:
        return True


STRICT_TRANSITIONS: Mapping[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.ACCEPTED, OrderStatus.CANCELLED}),
    OrderStatus.ACCEPTED: frozenset({OrderStatus.IN_TRANSIT, OrderStatus.CANCELLED}),
    OrderStatus.IN_TRANSIT: frozenset({OrderStatus.CLEARED, OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.CLEARED: frozenset({OrderStatus.IN_TRANSIT, OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class StrictTransitionPolicy:
    name = "strict"

    def __init__(self, table: Mapping[OrderStatus, frozenset[OrderStatus]] = STRICT_TRANSITIONS) -> None:
        self._table = table

    def allows(self, current: OrderStatus, target: OrderStatus) -> bool:
        # Re-entering the current status is a no-op, never a violation.
        if current is target:
            return True
        return target in self._table.get(current, frozenset())


def get_policy(name: str) -> TransitionPolicy:
    if name == StrictTransitionPolicy.name:
        return StrictTransitionPolicy()
    if name == AnyToAnyPolicy.name:
        return AnyToAnyPolicy()
    raise ValueError(f"Unknown transition policy: {name}")


def ensure_allowed(policy: TransitionPolicy, current: OrderStatus, target: OrderStatus) -> None:
    if not policy.allows(current, target):
        raise InvalidStatusTransitionError(
            f"Cannot move order from {current.value} to {target.value}"
        )
