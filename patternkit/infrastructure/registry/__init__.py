"""Infrastructure registry patterns."""

from .strategy_registry import StrategyRegistry, normalize_discriminator

__all__ = [
    'StrategyRegistry',
    'normalize_discriminator',
]
