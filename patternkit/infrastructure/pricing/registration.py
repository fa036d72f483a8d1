"""Discount strategy registration."""
from functools import partial

from patternkit.config.schemas.pricing_schema import PricingConfig
from patternkit.domain.pricing.ports import DiscountStrategy
from patternkit.infrastructure.pricing.strategies import (
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
)
from patternkit.infrastructure.registry.strategy_registry import StrategyRegistry


def register_discount_strategies(registry: StrategyRegistry[DiscountStrategy],
                                 config: PricingConfig) -> None:
    """Register the built-in discount strategies with configured parameters."""
    registry.register(NoDiscount.name, NoDiscount)
    registry.register(PercentageDiscount.name, partial(PercentageDiscount, config.percentage_rate))
    registry.register(FixedAmountDiscount.name, partial(FixedAmountDiscount, config.fixed_amount))
