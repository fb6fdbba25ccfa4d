"""Values derived from an order on every read; none of them are stored."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any

from agromove.core.money import from_cents
from agromove.db.models import Order

logger = logging.getLogger(__name__)

LOGISTICS_ONLY_SUMMARY = "Logistics Service"


def total_payable(order: Order) -> Decimal:
    """Sum of line items at purchase price, or the quoted estimate when there are none."""
    if order.items:
        return from_cents(sum(item.price_at_purchase_cents * item.quantity for item in order.items))
    return from_cents(order.estimated_cost_cents or 0)


def marketplace_summary(order: Order) -> str:
    if order.items:
        return ", ".join(f"{item.quantity}x {item.product_name}" for item in order.items)
    return LOGISTICS_ONLY_SUMMARY


def parse_details(raw: str | None) -> Any:
    """Decode the free-form details blob as stored; blank or undecodable input becomes ``{}``."""
    if raw is None or not raw.strip():
        return {}
    # Deeply nested arrays exhaust the decoder's recursion limit.
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Ignoring malformed order details payload (%d chars)", len(raw))
        return {}
