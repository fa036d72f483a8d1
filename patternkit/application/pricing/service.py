# patternkit/application/pricing/service.py
from typing import Any, List

from patternkit.domain.pricing.ports import DiscountStrategy
from patternkit.domain.pricing.value_objects import Quote, to_money
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry.strategy_registry import StrategyRegistry


class PricingService:
    """Application service quoting prices under a named discount strategy."""

    def __init__(self, discounts: StrategyRegistry[DiscountStrategy]):
        self._discounts = discounts
        self._logger = get_logger(__name__)

    def quote(self, strategy: str, amount: Any) -> Quote:
        """
        Quote a subtotal under a discount strategy.

        Raises:
            UnknownDiscriminatorError: If the strategy is not registered
            ValidationError: If the amount is not a non-negative number
        """
        discount_strategy = self._discounts.create(strategy)
        subtotal = to_money(amount)
        total = discount_strategy.apply(subtotal)
        quote = Quote(
            strategy=discount_strategy.name,
            subtotal=subtotal,
            discount=subtotal - total,
            total=total,
        )
        self._logger.debug(f"Quoted {subtotal} with {quote.strategy}: {total}")
        return quote

    def available_strategies(self) -> List[str]:
        return list(self._discounts.discriminators())
