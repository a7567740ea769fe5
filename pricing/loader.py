"""YAML loading and saving utilities for car records."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .car import Car, check_purchase_value

logger = logging.getLogger(__name__)


def _parse_car(dct: Dict[str, Any]) -> Car:
    """Parse a camelCase dictionary into a Car."""
    # str() first so a YAML float never becomes a binary-float Decimal
    return Car(
        purchase_value=check_purchase_value(Decimal(str(dct["purchaseValue"]))),
        age_in_months=int(dct["ageInMonths"]),
        number_of_miles=int(dct["numberOfMiles"]),
        number_of_previous_owners=int(dct["numberOfPreviousOwners"]),
        number_of_collisions=int(dct["numberOfCollisions"]),
    )


def _car_to_dict(car: Car) -> Dict[str, Any]:
    """Serialize a Car to the YAML dict format (camelCase keys)."""
    return {
        "purchaseValue": str(car.purchase_value),
        "ageInMonths": car.age_in_months,
        "numberOfMiles": car.number_of_miles,
        "numberOfPreviousOwners": car.number_of_previous_owners,
        "numberOfCollisions": car.number_of_collisions,
    }


def load_car(filename: Union[str, Path]) -> Car:
    """Load a car from a YAML file."""
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    logger.debug("Loaded car from %s", filename)
    return _parse_car(data)


def save_car(filename: Union[str, Path], car: Car) -> None:
    """Write a car to a YAML file, replacing any existing content."""
    with open(filename, "w") as fp:
        yaml.dump(
            _car_to_dict(car),
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )
    logger.debug("Saved car to %s", filename)
