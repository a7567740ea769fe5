"""Helper functions for the individual price adjustments."""

from decimal import Decimal

from .policy import DEFAULT_POLICY, PricingPolicy


def effective_months(age_in_months: int, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    """Months of age that count toward depreciation (capped)."""
    return min(age_in_months, policy.max_age_months)


def effective_mileage_blocks(
    number_of_miles: int, policy: PricingPolicy = DEFAULT_POLICY
) -> int:
    """
    Whole mileage blocks that count toward depreciation.

    The cap is applied to raw miles first, then remaining miles short of a
    full block are dropped.
    """
    return min(number_of_miles, policy.max_miles) // policy.mileage_step


def reduce_value_on_age(
    price: Decimal, age_in_months: int, policy: PricingPolicy = DEFAULT_POLICY
) -> Decimal:
    """Flat reduction of rate per month, not compounded."""
    months = effective_months(age_in_months, policy)
    return price * (1 - months * policy.age_reduction_rate)


def reduce_value_on_miles(
    price: Decimal, number_of_miles: int, policy: PricingPolicy = DEFAULT_POLICY
) -> Decimal:
    """Flat reduction of rate per full mileage block."""
    blocks = effective_mileage_blocks(number_of_miles, policy)
    return price * (1 - blocks * policy.mileage_reduction_rate)


def reduce_value_on_previous_owners(
    price: Decimal,
    number_of_previous_owners: int,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> Decimal:
    """Penalty for more owners than the threshold; otherwise unchanged."""
    if number_of_previous_owners > policy.previous_owner_threshold:
        return price * (1 - policy.previous_owner_reduction_rate)
    return price


def reduce_value_on_collisions(
    price: Decimal, number_of_collisions: int, policy: PricingPolicy = DEFAULT_POLICY
) -> Decimal:
    """
    Reduce by rate per collision below the cap.

    Reaching the cap disables the reduction entirely rather than clamping it.
    """
    if number_of_collisions < policy.max_collisions:
        return price * (1 - number_of_collisions * policy.collision_reduction_rate)
    return price


def add_no_previous_owner_bonus(
    price: Decimal, policy: PricingPolicy = DEFAULT_POLICY
) -> Decimal:
    """Add the no-previous-owner bonus on top of price."""
    return price * (1 + policy.no_previous_owner_bonus_rate)
