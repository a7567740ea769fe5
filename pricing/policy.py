"""Pricing policy constants."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PricingPolicy:
    """Rates, caps and thresholds applied by the price determinator."""

    age_reduction_rate: Decimal = Decimal("0.005")
    max_age_months: int = 120

    mileage_step: int = 1000
    mileage_reduction_rate: Decimal = Decimal("0.002")
    max_miles: int = 150000

    previous_owner_threshold: int = 2
    previous_owner_reduction_rate: Decimal = Decimal("0.25")
    no_previous_owner_bonus_rate: Decimal = Decimal("0.10")

    collision_reduction_rate: Decimal = Decimal("0.02")
    max_collisions: int = 5  # At or above this, collisions are ignored entirely


DEFAULT_POLICY = PricingPolicy()
