"""Pricing domain."""

from .ports import DiscountStrategy
from .value_objects import CENTS, Quote, to_money

__all__ = ['DiscountStrategy', 'Quote', 'to_money', 'CENTS']
