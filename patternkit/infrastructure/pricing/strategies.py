"""Discount strategy variants."""
from decimal import ROUND_HALF_UP, Decimal

from patternkit.domain.base.exceptions import ValidationError
from patternkit.domain.pricing.ports import DiscountStrategy
from patternkit.domain.pricing.value_objects import CENTS, to_money

HUNDRED = Decimal("100")


class NoDiscount(DiscountStrategy):
    name = "none"

    def apply(self, amount: Decimal) -> Decimal:
        return to_money(amount)


class PercentageDiscount(DiscountStrategy):
    """Takes a fixed percentage off the subtotal."""

    name = "percentage"

    def __init__(self, rate: Decimal):
        rate = Decimal(rate)
        if rate < 0 or rate > HUNDRED:
            raise ValidationError(f"Percentage rate must be between 0 and 100, got {rate}")
        self.rate = rate

    def apply(self, amount: Decimal) -> Decimal:
        subtotal = to_money(amount)
        discounted = subtotal * (HUNDRED - self.rate) / HUNDRED
        return discounted.quantize(CENTS, rounding=ROUND_HALF_UP)


class FixedAmountDiscount(DiscountStrategy):
    """Takes a fixed amount off the subtotal, never going below zero."""

    name = "fixed"

    def __init__(self, amount: Decimal):
        self.amount = to_money(amount)

    def apply(self, amount: Decimal) -> Decimal:
        subtotal = to_money(amount)
        return max(subtotal - self.amount, Decimal("0.00"))
