#!/usr/bin/env python3
"""
CLI for used-car price determination.

Commands:
  quote     - Price a car described on the command line
  appraise  - Price a car stored in a YAML file
  policy    - List the pricing policy constants
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pathlib import Path
from tabulate import tabulate
from typing import List

from pricing import (
    Car,
    DEFAULT_POLICY,
    PriceDeterminator,
    PricingPolicy,
    Valuation,
    check_purchase_value,
    load_car,
    save_car,
)
from validate_yaml import load_schema, validate_car_file

CENT = Decimal("0.01")

# =============================================================================
# Formatting helpers
# =============================================================================


def format_price(price: Decimal) -> str:
    """Format a price for display, rounded to cents."""
    return f"${price.quantize(CENT, rounding=ROUND_HALF_UP):,.2f}"


def format_change(change: Decimal) -> str:
    """Format a signed price change (e.g., '-$6,300.00' or '+$1,968.82')."""
    if change < 0:
        return f"-{format_price(-change)}"
    return f"+{format_price(change)}"


def format_rate(rate: Decimal) -> str:
    """Format a fractional rate as a percentage (e.g., '0.5%')."""
    return f"{(rate * 100).normalize():f}%"


def make_valuation_table(valuation: Valuation) -> List[List[str]]:
    """Convert valuation steps to table rows."""
    rows = []
    for step in valuation.steps:
        rows.append(
            [
                step.name,
                step.detail or "-",
                format_price(step.price_before),
                format_change(step.change),
                format_price(step.price_after),
            ]
        )
    return rows


def make_policy_table(policy: PricingPolicy) -> List[List[str]]:
    """Convert policy constants to table rows."""
    return [
        ["Age", f"{format_rate(policy.age_reduction_rate)} per month",
         f"{policy.max_age_months} mo"],
        ["Mileage",
         f"{format_rate(policy.mileage_reduction_rate)} per {policy.mileage_step:,} mi",
         f"{policy.max_miles:,} mi"],
        ["Previous owners",
         f"-{format_rate(policy.previous_owner_reduction_rate)} "
         f"if more than {policy.previous_owner_threshold}",
         "-"],
        ["Collisions", f"{format_rate(policy.collision_reduction_rate)} each",
         f"none applied at {policy.max_collisions}+"],
        ["No previous owner",
         f"+{format_rate(policy.no_previous_owner_bonus_rate)} after collisions",
         "-"],
    ]


def print_valuation(valuation: Valuation) -> None:
    """Print a valuation header, breakdown table and final price."""
    car = valuation.car
    print(f"Car: {car.summary}")
    print(f"Purchase value: {format_price(car.purchase_value)}")
    print()

    headers = ["Step", "Detail", "Before", "Change", "After"]
    print(tabulate(make_valuation_table(valuation), headers=headers, tablefmt="simple"))
    print()

    print(f"Total change: {format_change(valuation.total_change)}")
    print(f"Price: {format_price(valuation.price)}")


def parse_decimal(text: str) -> Decimal:
    """argparse type for purchase values."""
    try:
        return check_purchase_value(Decimal(text))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: '{text}'") from None
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def parse_count(text: str) -> int:
    """argparse type for non-negative integers."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"count must be non-negative: '{text}'")
    return value


# =============================================================================
# Quote command
# =============================================================================


def cmd_quote(args):
    """Price a car described on the command line."""
    car = Car(
        purchase_value=args.value,
        age_in_months=args.age,
        number_of_miles=args.miles,
        number_of_previous_owners=args.owners,
        number_of_collisions=args.collisions,
    )

    valuation = PriceDeterminator().determine_valuation(car)
    print_valuation(valuation)

    if args.save:
        save_car(args.save, car)
        print()
        print(f"Car saved to {args.save}.")

    return 0


# =============================================================================
# Appraise command
# =============================================================================


def cmd_appraise(args):
    """Price a car stored in a YAML file."""
    if not args.car_file.exists():
        print(f"Error: File not found: {args.car_file}")
        return 1

    errors = validate_car_file(args.car_file, load_schema())
    if errors:
        print(f"Error: Invalid car file: {args.car_file}")
        for error in errors:
            print(f"  {error}")
        return 1

    car = load_car(args.car_file)
    valuation = PriceDeterminator().determine_valuation(car)
    print_valuation(valuation)

    return 0


# =============================================================================
# Policy command
# =============================================================================


def cmd_policy(args):
    """List the pricing policy constants."""
    headers = ["Factor", "Rate", "Cap"]
    print(tabulate(make_policy_table(DEFAULT_POLICY), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Used-car price determinator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s quote --value 35000 --age 36 --miles 50000 --owners 1 --collisions 1
  %(prog)s quote --value 35000 --age 36 --miles 50000 --owners 0 \\
      --collisions 0 --save cars/civic.yaml
  %(prog)s appraise cars/civic.yaml
  %(prog)s -v appraise cars/civic.yaml
  %(prog)s policy
""",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each pricing stage",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Quote subcommand
    quote_parser = subparsers.add_parser(
        "quote", help="Price a car described on the command line"
    )
    quote_parser.add_argument(
        "--value",
        type=parse_decimal,
        required=True,
        help="Purchase value (e.g., 35000 or 35000.00)",
    )
    quote_parser.add_argument(
        "--age",
        type=parse_count,
        required=True,
        help="Age in months",
    )
    quote_parser.add_argument(
        "--miles",
        type=parse_count,
        required=True,
        help="Total miles driven",
    )
    quote_parser.add_argument(
        "--owners",
        type=parse_count,
        default=1,
        help="Number of previous owners (default: 1)",
    )
    quote_parser.add_argument(
        "--collisions",
        type=parse_count,
        default=0,
        help="Number of reported collisions (default: 0)",
    )
    quote_parser.add_argument(
        "--save",
        type=Path,
        help="Also write the car to this YAML file",
    )

    # Appraise subcommand
    appraise_parser = subparsers.add_parser(
        "appraise", help="Price a car stored in a YAML file"
    )
    appraise_parser.add_argument(
        "car_file",
        type=Path,
        help="Path to car YAML file",
    )

    # Policy subcommand
    subparsers.add_parser("policy", help="List the pricing policy constants")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to command handler
    if args.command == "quote":
        return cmd_quote(args)
    elif args.command == "appraise":
        return cmd_appraise(args)
    elif args.command == "policy":
        return cmd_policy(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
