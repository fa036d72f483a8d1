"""Pricing configuration schema."""
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class PricingConfig(BaseModel):
    """Parameters for the configurable discount strategies."""

    percentage_rate: Decimal = Field(Decimal("10"), description="Percent taken off by 'percentage'")
    fixed_amount: Decimal = Field(Decimal("5.00"), description="Amount taken off by 'fixed'")

    @field_validator("percentage_rate")
    @classmethod
    def validate_rate(cls, v: Decimal) -> Decimal:
        if v < 0 or v > 100:
            raise ValueError("Percentage rate must be between 0 and 100")
        return v

    @field_validator("fixed_amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Fixed discount must not be negative")
        return v
