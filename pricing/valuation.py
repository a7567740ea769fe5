"""Valuation dataclasses for a calculated price breakdown."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, TYPE_CHECKING

from .ownership import OwnershipEffect

if TYPE_CHECKING:
    from .car import Car


@dataclass
class ValuationStep:
    """One applied stage of the pricing pipeline."""

    name: str
    price_before: Decimal
    price_after: Decimal
    detail: str = ""

    @property
    def change(self) -> Decimal:
        return self.price_after - self.price_before


@dataclass
class Valuation:
    """Calculated price for a car, with each stage that produced it."""

    car: "Car"
    ownership_effect: OwnershipEffect
    steps: List[ValuationStep] = field(default_factory=list)

    @property
    def price(self) -> Decimal:
        """Final price; the purchase value if nothing was applied."""
        if not self.steps:
            return self.car.purchase_value
        return self.steps[-1].price_after

    @property
    def total_change(self) -> Decimal:
        return self.price - self.car.purchase_value

