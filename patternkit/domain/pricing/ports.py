"""Domain port for discount strategies."""

from abc import ABC, abstractmethod
from decimal import Decimal


class DiscountStrategy(ABC):
    """Capability contract: turn a subtotal into a discounted total."""

    name: str = ""

    @abstractmethod
    def apply(self, amount: Decimal) -> Decimal:
        """Return the discounted amount, rounded to cents and never negative."""
