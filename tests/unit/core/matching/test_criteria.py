#!/usr/bin/env python3
"""
Unit tests for the seven-factor Criteria Scorer.
"""

import unittest

import pytest
from pydantic import ValidationError

from core.config_loader import ConstraintConfig, CriteriaWeights, MatchingConfig
from core.matching import criteria
from core.matching.models import CriteriaBreakdown, ProviderView
from tests.mocks.capital_mocks import REFERENCE_NOW, make_firm, make_investor, make_seeker


def view(provider):
    return ProviderView.from_provider(provider, REFERENCE_NOW)


class TestScoreCriteria(unittest.TestCase):
    """Breakdown for the seed fintech seeker against an aligned VC firm."""

    def setUp(self):
        self.config = MatchingConfig()
        self.seeker = make_seeker()
        self.firm = view(make_firm())

    def test_01_breakdown(self):
        print("\n📐 UNIT Test 1: Criteria Breakdown")

        breakdown, base = criteria.score_criteria(self.seeker, self.firm, self.config)

        self.assertEqual(breakdown.stage_compatibility, 100.0)
        self.assertEqual(breakdown.economic_fit, 94.0)
        self.assertEqual(breakdown.geographic_practicality, 100.0)
        self.assertEqual(breakdown.investor_behavior, 95.0)
        self.assertEqual(breakdown.investor_type_logic, 90.0)
        self.assertEqual(breakdown.network_warmth, 50.0)
        # Jaccard of the two profiles plus the fintech thesis bonus (12)
        self.assertEqual(breakdown.semantic_fit, 23.0)
        self.assertEqual(base, 69)

        print(f"  ✓ Breakdown: {breakdown.as_dict()}")
        print(f"  ✓ Base score: {base}")

    def test_02_every_factor_in_bounds(self):
        for provider in (make_firm(), make_investor(), make_firm(description=None, sectors=[])):
            breakdown, base = criteria.score_criteria(self.seeker, view(provider), self.config)
            for name, value in breakdown.as_dict().items():
                self.assertGreaterEqual(value, 0, name)
                self.assertLessEqual(value, 100, name)
            self.assertTrue(0 <= base <= 100)

    def test_03_base_score_uses_configured_weights(self):
        breakdown = CriteriaBreakdown(
            semantic_fit=100, stage_compatibility=0, economic_fit=0, geographic_practicality=0,
            investor_behavior=0, investor_type_logic=0, network_warmth=0,
        )
        self.assertEqual(criteria.base_score(breakdown, self.config), 35)

        heavy_semantic = MatchingConfig(weights=CriteriaWeights(
            semantic_fit=0.65, stage_compatibility=0.10, economic_fit=0.10,
            geographic_practicality=0.05, investor_behavior=0.05,
            investor_type_logic=0.025, network_warmth=0.025,
        ))
        self.assertEqual(criteria.base_score(breakdown, heavy_semantic), 65)

    def test_04_weights_must_sum_to_one(self):
        with self.assertRaises(ValidationError):
            CriteriaWeights(semantic_fit=0.5)


class TestSemanticFit:

    def test_missing_text_is_neutral(self):
        blank = make_seeker(industries=[], description=None, stage=None, location=None)
        assert criteria.semantic_fit(blank, view(make_firm())) == 50.0

    def test_thesis_bonus_capped_per_cluster(self):
        bonus = criteria.thesis_bonus("film movie entertainment", "film movie studio")
        assert bonus == 15

    def test_thesis_bonus_capped_in_total(self):
        seeker_text = "film movie studio real estate property reit climate carbon energy"
        provider_text = "film movie content real estate multifamily reit climate renewable carbon"
        assert criteria.thesis_bonus(seeker_text, provider_text) == 30

    def test_no_bonus_without_shared_cluster(self):
        assert criteria.thesis_bonus("film studio", "fintech lending") == 0


class TestStageAndEconomicFit:

    @pytest.mark.parametrize("stages,expected", [
        (["seed"], 100.0),
        (["Series A"], 70.0),
        (["Series B"], 40.0),
        (["Growth"], 20.0),
        ([], 100.0),
    ])
    def test_stage_compatibility(self, stages, expected):
        score = criteria.stage_compatibility(make_seeker(), view(make_firm(stages=stages)))
        assert score == expected

    def test_economic_fit_monotonic_in_overlap(self):
        seeker = make_seeker(target_amount=1_000_000)
        constraints = ConstraintConfig()
        narrow = view(make_firm(check_size_min=1_450_000, check_size_max=2_450_000))  # overlap 0.05
        wide = view(make_firm(check_size_min=1_000_000, check_size_max=2_000_000))  # overlap 0.5

        narrow_fit = criteria.economic_fit(seeker, narrow, constraints)
        wide_fit = criteria.economic_fit(seeker, wide, constraints)

        assert narrow_fit < wide_fit
        assert wide_fit == 65.0

    def test_economic_fit_floor_without_overlap(self):
        seeker = make_seeker(target_amount=None)
        assert criteria.economic_fit(seeker, view(make_firm()), ConstraintConfig()) == 30.0

    def test_aum_too_large_caps_at_sixty(self):
        giant = view(make_firm(aum="$5B"))
        assert criteria.economic_fit(make_seeker(), giant, ConstraintConfig()) == 60.0

    def test_aum_too_small_caps_at_fifty(self):
        tiny = view(make_firm(aum="$5M"))
        assert criteria.economic_fit(make_seeker(), tiny, ConstraintConfig()) == 50.0


class TestGeographicPracticality:

    def score(self, seeker_location, provider_location):
        seeker = make_seeker(location=seeker_location)
        provider = view(make_firm(hq_location=provider_location))
        return criteria.geographic_practicality(seeker, provider)

    def test_missing_location_is_neutral(self):
        assert self.score(None, "London, UK") == 50.0
        assert self.score("London, UK", None) == 50.0

    def test_global_provider(self):
        assert self.score("Lagos, Nigeria", "Global") == 100.0

    def test_same_city(self):
        assert self.score("Austin, TX", "Austin, Texas") == 100.0

    def test_same_region(self):
        assert self.score("Berlin, Germany", "London, UK") == 90.0

    def test_containment(self):
        assert self.score("San Francisco", "San Francisco Bay Area") == 100.0

    def test_far(self):
        assert self.score("Tokyo, Japan", "São Paulo, Brazil") == 30.0


class TestBehaviorAndInvestorType(unittest.TestCase):

    def test_01_firm_behavior(self):
        active = view(make_firm(portfolio_count=3, days_since_update=10))
        self.assertEqual(criteria.investor_behavior(active), 88.0)

        stale = view(make_firm(portfolio_count=0, days_since_update=200))
        self.assertEqual(criteria.investor_behavior(stale), 60.0)

    def test_02_individual_behavior(self):
        self.assertEqual(criteria.investor_behavior(view(make_investor())), 80.0)
        bare = view(make_investor(email=None, linkedin_url=None))
        self.assertEqual(criteria.investor_behavior(bare), 70.0)

    def test_03_investor_type_logic(self):
        firm = view(make_firm())
        self.assertEqual(criteria.investor_type_logic(make_seeker(stage="Seed"), firm), 90.0)

        pe = view(make_firm(firm_type="Private Equity"))
        self.assertEqual(criteria.investor_type_logic(make_seeker(stage="Series A"), pe), 50.0)
        self.assertEqual(criteria.investor_type_logic(make_seeker(stage="Growth"), pe), 95.0)

    def test_04_investor_type_defaults(self):
        firm = view(make_firm())
        self.assertEqual(criteria.investor_type_logic(make_seeker(stage="Late Stage"), firm), 50.0)
        pension = view(make_firm(firm_type="Pension Fund"))
        self.assertEqual(criteria.investor_type_logic(make_seeker(stage="Seed"), pension), 50.0)

    def test_05_network_warmth_is_constant(self):
        self.assertEqual(criteria.network_warmth(make_seeker(), view(make_firm())), 50.0)


class TestReasons(unittest.TestCase):

    def test_01_reasons_from_breakdown(self):
        breakdown, _ = criteria.score_criteria(make_seeker(), view(make_firm()), MatchingConfig())
        reasons = criteria.generate_reasons(breakdown, view(make_firm()))

        self.assertIn("Perfect stage match", reasons)
        self.assertIn("Check size aligned with target", reasons)
        self.assertIn("Geographic alignment", reasons)
        self.assertIn("Active investor profile", reasons)
        self.assertIn("Investor type fits stage", reasons)
        self.assertNotIn("Strong thesis alignment", reasons)

    def test_02_fallback_reason(self):
        reasons = criteria.generate_reasons(CriteriaBreakdown.empty(), view(make_firm()))
        self.assertEqual(reasons, ["Potential match with Acme Ventures"])


if __name__ == '__main__':
    unittest.main()
