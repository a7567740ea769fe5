#!/usr/bin/env python3
"""Tests for price adjustment helper functions."""
from dataclasses import replace
from decimal import Decimal

from pricing import (
    DEFAULT_POLICY,
    effective_months,
    effective_mileage_blocks,
    reduce_value_on_age,
    reduce_value_on_miles,
    reduce_value_on_previous_owners,
    reduce_value_on_collisions,
    add_no_previous_owner_bonus,
)


class TestEffectiveMonths:
    """Tests for effective_months helper function."""

    def test_below_cap(self):
        assert effective_months(36) == 36

    def test_at_cap(self):
        assert effective_months(120) == 120

    def test_above_cap(self):
        """Age beyond ten years counts as ten years."""
        assert effective_months(200) == 120

    def test_zero(self):
        assert effective_months(0) == 0


class TestEffectiveMileageBlocks:
    """Tests for effective_mileage_blocks helper function."""

    def test_whole_blocks(self):
        assert effective_mileage_blocks(50000) == 50

    def test_remaining_miles_ignored(self):
        """Miles short of a full block do not count."""
        assert effective_mileage_blocks(999) == 0
        assert effective_mileage_blocks(1999) == 1
        assert effective_mileage_blocks(149999) == 149

    def test_capped_before_flooring(self):
        """Raw miles are capped first, then floored."""
        assert effective_mileage_blocks(150000) == 150
        assert effective_mileage_blocks(150999) == 150
        assert effective_mileage_blocks(250000) == 150

    def test_custom_step(self):
        policy = replace(DEFAULT_POLICY, mileage_step=500)
        assert effective_mileage_blocks(1999, policy) == 3


class TestReduceValueOnAge:
    """Tests for reduce_value_on_age."""

    def test_flat_reduction(self):
        """36 months at 0.5% is a flat 18% off, not compounded."""
        assert reduce_value_on_age(Decimal("35000"), 36) == Decimal("28700")

    def test_new_car_unchanged(self):
        assert reduce_value_on_age(Decimal("35000"), 0) == Decimal("35000")

    def test_capped_at_ten_years(self):
        at_cap = reduce_value_on_age(Decimal("35000"), 120)
        assert at_cap == Decimal("14000")
        assert reduce_value_on_age(Decimal("35000"), 121) == at_cap
        assert reduce_value_on_age(Decimal("35000"), 500) == at_cap

    def test_returns_decimal(self):
        assert isinstance(reduce_value_on_age(Decimal("100"), 1), Decimal)


class TestReduceValueOnMiles:
    """Tests for reduce_value_on_miles."""

    def test_per_block_reduction(self):
        """50 blocks at 0.2% is 10% off."""
        assert reduce_value_on_miles(Decimal("28700"), 50000) == Decimal("25830")

    def test_partial_block_unchanged(self):
        assert reduce_value_on_miles(Decimal("28700"), 999) == Decimal("28700")

    def test_capped(self):
        at_cap = reduce_value_on_miles(Decimal("28700"), 150000)
        assert at_cap == Decimal("20090")
        assert reduce_value_on_miles(Decimal("28700"), 250000) == at_cap


class TestReduceValueOnPreviousOwners:
    """Tests for reduce_value_on_previous_owners."""

    def test_above_threshold(self):
        """More than two owners takes 25% off."""
        assert reduce_value_on_previous_owners(Decimal("20000"), 3) == Decimal("15000")

    def test_at_threshold_unchanged(self):
        assert reduce_value_on_previous_owners(Decimal("20000"), 2) == Decimal("20000")

    def test_no_owners_unchanged(self):
        """The no-owner bonus is not applied here."""
        assert reduce_value_on_previous_owners(Decimal("20000"), 0) == Decimal("20000")


class TestReduceValueOnCollisions:
    """Tests for reduce_value_on_collisions."""

    def test_per_collision_reduction(self):
        assert reduce_value_on_collisions(Decimal("10000"), 1) == Decimal("9800")
        assert reduce_value_on_collisions(Decimal("10000"), 4) == Decimal("9200")

    def test_no_collisions_unchanged(self):
        assert reduce_value_on_collisions(Decimal("10000"), 0) == Decimal("10000")

    def test_cutoff_at_cap(self):
        """Reaching the cap disables the reduction instead of clamping it."""
        assert reduce_value_on_collisions(Decimal("10000"), 5) == Decimal("10000")
        assert reduce_value_on_collisions(Decimal("10000"), 9) == Decimal("10000")


class TestAddNoPreviousOwnerBonus:
    """Tests for add_no_previous_owner_bonus."""

    def test_adds_ten_percent(self):
        assert add_no_previous_owner_bonus(Decimal("19688.2")) == Decimal("21657.02")

    def test_custom_rate(self):
        policy = replace(DEFAULT_POLICY, no_previous_owner_bonus_rate=Decimal("0.5"))
        assert add_no_previous_owner_bonus(Decimal("100"), policy) == Decimal("150")
