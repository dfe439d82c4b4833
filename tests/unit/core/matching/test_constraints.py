#!/usr/bin/env python3
"""
Unit tests for the Constraint Gate.
"""

import unittest
from datetime import timedelta

from core.config_loader import ConstraintConfig
from core.matching.constraints import check_constraints
from core.matching.models import ProviderView
from tests.mocks.capital_mocks import REFERENCE_NOW, make_firm, make_investor, make_seeker


class TestConstraintGate(unittest.TestCase):
    """Hard constraints, each failure accumulated independently."""

    def setUp(self):
        self.config = ConstraintConfig()
        self.seeker = make_seeker()

    def gate(self, provider, seeker=None, include_inactive=False):
        view = ProviderView.from_provider(provider, REFERENCE_NOW)
        return check_constraints(seeker or self.seeker, view, include_inactive, self.config, REFERENCE_NOW)

    def test_01_matching_pair_passes(self):
        """Aligned check size and stage pass with no failures."""
        print("\n🚦 UNIT Test 1: Gate Pass")

        result = self.gate(make_firm())

        self.assertTrue(result.passed)
        self.assertEqual(result.failures, ())
        print(f"  ✓ Passed: {result.passed}")

    def test_02_check_size_mismatch(self):
        """A $10M raise against a $50K max check is rejected."""
        print("\n🚦 UNIT Test 2: Check Size Mismatch")

        seeker = make_seeker(target_amount=10_000_000)
        firm = make_firm(check_size_min=None, check_size_max=50_000)
        result = self.gate(firm, seeker=seeker)

        self.assertFalse(result.passed)
        self.assertIn("Check size mismatch: less than 10% overlap", result.failures)
        print(f"  ✓ Failures: {result.failures}")

    def test_03_missing_check_size_data_rejects(self):
        firm = make_firm(check_size_min=None, check_size_max=None, typical_check_size=None)
        result = self.gate(firm)
        self.assertFalse(result.passed)
        self.assertTrue(result.failures[0].startswith("Check size mismatch"))

    def test_04_stage_distance_one_passes(self):
        """Boundary: exactly one level apart passes."""
        result = self.gate(make_firm(stages=["Series A"]))
        self.assertTrue(result.passed)

    def test_05_stage_distance_two_fails(self):
        """Boundary: exactly two levels apart fails."""
        result = self.gate(make_firm(stages=["Series B"]))
        self.assertFalse(result.passed)
        self.assertEqual(result.failures, ("Stage mismatch: 2 levels apart",))

    def test_06_inactive_firm_rejected(self):
        stale = make_firm(days_since_update=200)
        result = self.gate(stale)
        self.assertFalse(result.passed)
        self.assertIn("Investor inactive for 6+ months", result.failures)

    def test_07_inactive_firm_allowed_when_included(self):
        stale = make_firm(days_since_update=200)
        self.assertTrue(self.gate(stale, include_inactive=True).passed)

    def test_08_inactivity_uses_calendar_months(self):
        """Five months and a few days is still active."""
        recent = make_firm(updated_at=REFERENCE_NOW - timedelta(days=170))
        self.assertTrue(self.gate(recent).passed)

    def test_09_created_at_used_without_updated_at(self):
        stale = make_firm(updated_at=None, created_at=REFERENCE_NOW - timedelta(days=400))
        self.assertIn("Investor inactive for 6+ months", self.gate(stale).failures)

    def test_10_individuals_never_inactive(self):
        old = make_investor(updated_at=REFERENCE_NOW - timedelta(days=900))
        self.assertTrue(self.gate(old).passed)

    def test_11_failures_accumulate(self):
        """Every failing check is reported, in gate order."""
        print("\n🚦 UNIT Test 11: Accumulated Failures")

        firm = make_firm(
            check_size_min=None, check_size_max=50_000,
            stages=["Growth"],
            days_since_update=365,
        )
        result = self.gate(firm)

        self.assertFalse(result.passed)
        self.assertEqual(len(result.failures), 3)
        self.assertTrue(result.failures[0].startswith("Check size mismatch"))
        self.assertEqual(result.failures[1], "Stage mismatch: 4 levels apart")
        self.assertEqual(result.failures[2], "Investor inactive for 6+ months")
        print(f"  ✓ Failures: {len(result.failures)}")

    def test_12_thresholds_come_from_config(self):
        self.config = ConstraintConfig(max_stage_distance=2)
        self.assertTrue(self.gate(make_firm(stages=["Series B"])).passed)


if __name__ == '__main__':
    unittest.main()
