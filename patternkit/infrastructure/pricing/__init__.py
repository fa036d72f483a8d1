"""Pricing infrastructure - discount strategy variants."""

from .registration import register_discount_strategies
from .strategies import FixedAmountDiscount, NoDiscount, PercentageDiscount

__all__ = [
    'NoDiscount',
    'PercentageDiscount',
    'FixedAmountDiscount',
    'register_discount_strategies',
]
