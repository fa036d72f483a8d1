"""Pricing value objects and money helpers."""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from patternkit.domain.base.entity import ValueObject
from patternkit.domain.base.exceptions import ValidationError

CENTS = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """
    Convert a value to a non-negative Decimal rounded to cents.

    Raises:
        ValidationError: If the value is not numeric, is negative, or has
            too many digits to represent in cents
    """
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"Invalid amount: {value!r}", {"amount": str(value)}) from e
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}", {"amount": str(value)})
    if amount < 0:
        raise ValidationError(f"Amount must not be negative: {amount}", {"amount": str(amount)})
    if amount == 0:
        # Drops the sign of "-0"
        amount = Decimal(0)
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(f"Amount out of range: {value!r}", {"amount": str(value)}) from e


class Quote(ValueObject):
    """Price breakdown produced by applying a discount strategy."""

    strategy: str
    subtotal: Decimal
    discount: Decimal
    total: Decimal
