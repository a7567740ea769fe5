"""Car class - the input record for a price determination."""

from dataclasses import dataclass
from decimal import Decimal

# Keeps every stage of the default policy within the default decimal context
MAX_PURCHASE_VALUE = Decimal("999999999.99")


def check_purchase_value(value: Decimal) -> Decimal:
    """
    Return value if it is usable as a purchase value.

    Raises ValueError for NaN, infinities, negatives, fractions of a cent
    and amounts above MAX_PURCHASE_VALUE.
    """
    if not value.is_finite():
        raise ValueError(f"purchase value must be finite: {value}")
    if value < 0:
        raise ValueError(f"purchase value must be non-negative: {value}")
    if value > MAX_PURCHASE_VALUE:
        raise ValueError(f"purchase value must not exceed {MAX_PURCHASE_VALUE}: {value}")
    if value.as_tuple().exponent < -2:
        raise ValueError(f"purchase value must be whole cents: {value}")
    return value


@dataclass(frozen=True)
class Car:
    """A used car as presented for valuation."""

    purchase_value: Decimal
    age_in_months: int
    number_of_miles: int
    number_of_previous_owners: int
    number_of_collisions: int

    @property
    def summary(self) -> str:
        """Human-readable one-line description."""
        return (
            f"{self.age_in_months} mo, {self.number_of_miles:,} mi, "
            f"{self.number_of_previous_owners} prev owner(s), "
            f"{self.number_of_collisions} collision(s)"
        )
