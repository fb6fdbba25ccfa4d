"""Fixed-point money helpers.

Amounts are stored as integer minor units and exposed as ``Decimal`` values
with exactly two decimal places.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from agromove.core.errors import InvalidArgumentError

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> int:
    """Convert a decimal amount into integer cents.

    Raises ``InvalidArgumentError`` for non-finite values or values with more
    than two decimal places.
    """
    try:
        amount = Decimal(amount)
        quantized = amount.quantize(CENT)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidArgumentError("Amount must be a valid decimal number") from exc
    if quantized != amount:
        raise InvalidArgumentError("Amount supports at most two decimal places")
    return int(quantized * 100)


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)
