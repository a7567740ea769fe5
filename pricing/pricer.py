"""PriceDeterminator class - computes the resale value of a used car."""

import logging
from decimal import Decimal

from .car import Car
from .calculations import (
    add_no_previous_owner_bonus,
    effective_mileage_blocks,
    effective_months,
    reduce_value_on_age,
    reduce_value_on_collisions,
    reduce_value_on_miles,
    reduce_value_on_previous_owners,
)
from .ownership import OwnershipEffect, effect_for_owners
from .policy import DEFAULT_POLICY, PricingPolicy
from .valuation import Valuation, ValuationStep

logger = logging.getLogger(__name__)

AGE = "age"
MILEAGE = "mileage"
PREVIOUS_OWNERS = "previous owners"
COLLISIONS = "collisions"
NO_PREVIOUS_OWNER_BONUS = "no previous owner bonus"


class PriceDeterminator:
    """Applies a pricing policy to cars."""

    def __init__(self, policy: PricingPolicy = DEFAULT_POLICY):
        self.policy = policy

    def determine_price(self, car: Car) -> Decimal:
        """Resale value of car. Not rounded."""
        return self.determine_valuation(car).price

    def determine_valuation(self, car: Car) -> Valuation:
        """
        Run the pricing pipeline and record each stage.

        Order:
        1. Age
        2. Mileage
        3. Previous owners, when the effect is a penalty
        4. Collisions
        5. Previous owners, when the effect is a bonus

        Each stage starts from the previous stage's result.
        """
        if car is None:
            raise TypeError("determine_valuation() requires a car")

        policy = self.policy
        effect = effect_for_owners(car.number_of_previous_owners, policy)
        valuation = Valuation(car=car, ownership_effect=effect)
        price = car.purchase_value

        months = effective_months(car.age_in_months, policy)
        price = self._record(
            valuation,
            AGE,
            price,
            reduce_value_on_age(price, car.age_in_months, policy),
            f"{months} mo x {policy.age_reduction_rate}",
        )

        blocks = effective_mileage_blocks(car.number_of_miles, policy)
        price = self._record(
            valuation,
            MILEAGE,
            price,
            reduce_value_on_miles(price, car.number_of_miles, policy),
            f"{blocks} x {policy.mileage_step:,} mi x {policy.mileage_reduction_rate}",
        )

        if effect == OwnershipEffect.PENALTY:
            price = self._record(
                valuation,
                PREVIOUS_OWNERS,
                price,
                reduce_value_on_previous_owners(
                    price, car.number_of_previous_owners, policy
                ),
                f"{car.number_of_previous_owners} owners > "
                f"{policy.previous_owner_threshold}",
            )

        if car.number_of_collisions < policy.max_collisions:
            collision_detail = (
                f"{car.number_of_collisions} x {policy.collision_reduction_rate}"
            )
        else:
            collision_detail = (
                f"{car.number_of_collisions} >= {policy.max_collisions}, not applied"
            )
        price = self._record(
            valuation,
            COLLISIONS,
            price,
            reduce_value_on_collisions(price, car.number_of_collisions, policy),
            collision_detail,
        )

        if effect == OwnershipEffect.BONUS:
            price = self._record(
                valuation,
                NO_PREVIOUS_OWNER_BONUS,
                price,
                add_no_previous_owner_bonus(price, policy),
                f"+{policy.no_previous_owner_bonus_rate}",
            )

        return valuation

    @staticmethod
    def _record(
        valuation: Valuation,
        name: str,
        price_before: Decimal,
        price_after: Decimal,
        detail: str,
    ) -> Decimal:
        """Append a step and return its resulting price."""
        logger.debug("%s: %s -> %s (%s)", name, price_before, price_after, detail)
        valuation.steps.append(
            ValuationStep(
                name=name,
                price_before=price_before,
                price_after=price_after,
                detail=detail,
            )
        )
        return price_after
