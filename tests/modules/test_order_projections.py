"""Derived order values computed on read."""

import logging
from decimal import Decimal

import pytest

from agromove.db.models import Order, OrderItem
from agromove.modules.orders.projections import (
    LOGISTICS_ONLY_SUMMARY,
    marketplace_summary,
    parse_details,
    total_payable,
)


def _order(estimated_cost_cents=0, items=()):
    return Order(
        estimated_cost_cents=estimated_cost_cents,
        items=[OrderItem(product_name=name, quantity=qty, price_at_purchase_cents=price) for name, qty, price in items],
    )


def test_total_payable_sums_line_items():
    order = _order(estimated_cost_cents=100, items=[("A", 2, 500), ("B", 1, 300)])
    assert total_payable(order) == Decimal("13.00")


def test_total_payable_uses_estimate_without_items():
    assert total_payable(_order(estimated_cost_cents=2500000)) == Decimal("25000.00")


def test_total_payable_of_unpriced_order_is_zero():
    assert total_payable(_order(estimated_cost_cents=None)) == Decimal("0.00")


def test_marketplace_summary_lists_items_in_order():
    order = _order(items=[("A", 2, 500), ("B", 1, 300)])
    assert marketplace_summary(order) == "2x A, 1x B"


def test_marketplace_summary_for_logistics_only_order():
    assert marketplace_summary(_order()) == LOGISTICS_ONLY_SUMMARY == "Logistics Service"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ('{"pallets": 4, "fragile": true}', {"pallets": 4, "fragile": True}),
        ("[1, 2]", [1, 2]),
        (None, {}),
        ("", {}),
        ("   ", {}),
        ('"just a string"', "just a string"),
        ("42", 42),
        ("true", True),
        ("null", None),
    ],
)
def test_parse_details(raw, expected):
    assert parse_details(raw) == expected


def test_malformed_details_fall_back_to_empty_object(caplog):
    with caplog.at_level(logging.WARNING, logger="agromove.modules.orders.projections"):
        assert parse_details("{not json") == {}
    assert "malformed order details" in caplog.text


def test_deeply_nested_details_fall_back_to_empty_object(caplog):
    raw = "[" * 100000 + "]" * 100000
    with caplog.at_level(logging.WARNING, logger="agromove.modules.orders.projections"):
        assert parse_details(raw) == {}
    assert "malformed order details" in caplog.text
