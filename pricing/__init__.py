"""
Used-car pricing.

This package determines the resale value of a used car:
- Car: The input record (purchase value, age, miles, owners, collisions)
- PricingPolicy: Rates, caps and thresholds
- OwnershipEffect: Which previous-owner adjustment applies
- Valuation: Calculated price with a per-stage breakdown
- PriceDeterminator: Runs the pricing pipeline
"""

from .car import Car, MAX_PURCHASE_VALUE, check_purchase_value
from .policy import PricingPolicy, DEFAULT_POLICY
from .ownership import OwnershipEffect, effect_for_owners
from .valuation import Valuation, ValuationStep
from .calculations import (
    effective_months,
    effective_mileage_blocks,
    reduce_value_on_age,
    reduce_value_on_miles,
    reduce_value_on_previous_owners,
    reduce_value_on_collisions,
    add_no_previous_owner_bonus,
)
from .pricer import PriceDeterminator
from .loader import load_car, save_car

__all__ = [
    "Car",
    "MAX_PURCHASE_VALUE",
    "check_purchase_value",
    "PricingPolicy",
    "DEFAULT_POLICY",
    "OwnershipEffect",
    "effect_for_owners",
    "Valuation",
    "ValuationStep",
    "effective_months",
    "effective_mileage_blocks",
    "reduce_value_on_age",
    "reduce_value_on_miles",
    "reduce_value_on_previous_owners",
    "reduce_value_on_collisions",
    "add_no_previous_owner_bonus",
    "PriceDeterminator",
    "load_car",
    "save_car",
]
