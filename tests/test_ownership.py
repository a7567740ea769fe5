#!/usr/bin/env python3
"""Tests for OwnershipEffect classification."""

from dataclasses import replace

import pytest

from pricing import DEFAULT_POLICY, OwnershipEffect, effect_for_owners


class TestEffectForOwners:
    """Tests for effect_for_owners."""

    def test_no_owners_is_bonus(self):
        assert effect_for_owners(0) == OwnershipEffect.BONUS

    @pytest.mark.parametrize("owners", [1, 2])
    def test_up_to_threshold_is_none(self, owners):
        assert effect_for_owners(owners) == OwnershipEffect.NONE

    @pytest.mark.parametrize("owners", [3, 4, 10])
    def test_above_threshold_is_penalty(self, owners):
        assert effect_for_owners(owners) == OwnershipEffect.PENALTY

    def test_uses_policy_threshold(self):
        """Threshold comes from the policy."""
        policy = replace(DEFAULT_POLICY, previous_owner_threshold=4)
        assert effect_for_owners(3, policy) == OwnershipEffect.NONE
        assert effect_for_owners(5, policy) == OwnershipEffect.PENALTY

    def test_exactly_one_effect(self):
        """Every owner count maps to exactly one member."""
        assert len(OwnershipEffect) == 3
        for owners in range(0, 8):
            assert isinstance(effect_for_owners(owners), OwnershipEffect)
