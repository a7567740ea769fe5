"""OwnershipEffect enum for the previous-owner adjustment."""

from enum import Enum

from .policy import DEFAULT_POLICY, PricingPolicy


class OwnershipEffect(Enum):
    """Which previous-owner adjustment applies to a car. Exactly one does."""

    PENALTY = 1  # Applied before collisions
    NONE = 2
    BONUS = 3  # Applied after collisions


def effect_for_owners(
    number_of_previous_owners: int, policy: PricingPolicy = DEFAULT_POLICY
) -> OwnershipEffect:
    """Classify a previous-owner count."""
    if number_of_previous_owners == 0:
        return OwnershipEffect.BONUS
    if number_of_previous_owners > policy.previous_owner_threshold:
        return OwnershipEffect.PENALTY
    return OwnershipEffect.NONE
