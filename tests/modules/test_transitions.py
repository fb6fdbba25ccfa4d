"""Status parsing and transition policies."""

import pytest

from agromove.modules.orders import (
    AnyToAnyPolicy,
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    OrderStatus,
    StrictTransitionPolicy,
    get_policy,
)
from agromove.modules.orders.transitions import ensure_allowed


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Pending", OrderStatus.PENDING),
        ("accepted", OrderStatus.ACCEPTED),
        ("INTRANSIT", OrderStatus.IN_TRANSIT),
        (" Cleared ", OrderStatus.CLEARED),
        ("delivered", OrderStatus.DELIVERED),
        ("cancelled", OrderStatus.CANCELLED),
    ],
)
def test_parse_is_case_insensitive(name, expected):
    assert OrderStatus.parse(name) is expected


@pytest.mark.parametrize("name", ["", "In Transit", "Shipped", "1", None])
def test_parse_rejects_unknown_names(name):
    with pytest.raises(InvalidOrderStatusError, match="Invalid status"):
        OrderStatus.parse(name)


def test_any_to_any_allows_every_pair():
    policy = AnyToAnyPolicy()
    assert all(policy.allows(a, b) for a in OrderStatus for b in OrderStatus)


def test_strict_policy_follows_the_delivery_path():
    policy = StrictTransitionPolicy()
    path = [
        OrderStatus.PENDING,
        OrderStatus.ACCEPTED,
        OrderStatus.IN_TRANSIT,
        OrderStatus.CLEARED,
        OrderStatus.DELIVERED,
    ]
    for current, target in zip(path, path[1:]):
        assert policy.allows(current, target)

    assert not policy.allows(OrderStatus.PENDING, OrderStatus.DELIVERED)
    assert not policy.allows(OrderStatus.CANCELLED, OrderStatus.PENDING)


def test_strict_policy_treats_same_status_as_allowed():
    policy = StrictTransitionPolicy()
    assert all(policy.allows(status, status) for status in OrderStatus)


def test_ensure_allowed_raises_with_both_statuses():
    with pytest.raises(InvalidStatusTransitionError, match="Delivered to Pending"):
        ensure_allowed(StrictTransitionPolicy(), OrderStatus.DELIVERED, OrderStatus.PENDING)


def test_get_policy_by_name():
    assert isinstance(get_policy("any"), AnyToAnyPolicy)
    assert isinstance(get_policy("strict"), StrictTransitionPolicy)
    with pytest.raises(ValueError):
        get_policy("loose")
