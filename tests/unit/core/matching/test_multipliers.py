#!/usr/bin/env python3
"""
Unit tests for blending and the context/activity multipliers.
"""

import pytest

from core.config_loader import BlendConfig, MultiplierConfig
from core.matching.models import CriteriaBreakdown, ProviderView
from core.matching.multipliers import activity_multiplier, blend_scores, context_multiplier, final_score
from tests.mocks.capital_mocks import REFERENCE_NOW, make_firm, make_investor, make_seeker


def view(provider):
    return ProviderView.from_provider(provider, REFERENCE_NOW)


LOCAL = CriteriaBreakdown(geographic_practicality=100)
REMOTE = CriteriaBreakdown(geographic_practicality=30)


class TestBlend:

    def test_default_blend(self):
        assert blend_scores(69, 72, BlendConfig()) == 71

    def test_custom_blend(self):
        assert blend_scores(40, 80, BlendConfig(base_weight=0.5, domain_weight=0.5)) == 60

    def test_blend_weights_validated(self):
        with pytest.raises(ValueError):
            BlendConfig(base_weight=0.5, domain_weight=0.6)


class TestContextMultiplier:

    def setup_method(self):
        self.config = MultiplierConfig()

    def test_early_stage_local_bonus(self):
        assert context_multiplier(make_seeker(stage="Seed"), view(make_firm()), LOCAL, self.config) == pytest.approx(1.10)

    def test_no_local_bonus_when_far_or_late(self):
        assert context_multiplier(make_seeker(stage="Seed"), view(make_firm()), REMOTE, self.config) == 1.0
        assert context_multiplier(make_seeker(stage="Series B"), view(make_firm()), LOCAL, self.config) == 1.0

    def test_geo_threshold_is_strict(self):
        at_threshold = CriteriaBreakdown(geographic_practicality=70)
        assert context_multiplier(make_seeker(), view(make_firm()), at_threshold, self.config) == 1.0

    def test_family_office_bonus(self):
        family_office = view(make_firm(firm_type="Single Family Office"))
        result = context_multiplier(make_seeker(stage="Series A"), family_office, REMOTE, self.config)
        assert result == pytest.approx(1.05)

    def test_niche_industry_bonus_needs_both_sides(self):
        film_seeker = make_seeker(stage="Series A", industries=["Film"])
        film_fund = view(make_firm(description="Independent film and entertainment fund"))
        assert context_multiplier(film_seeker, film_fund, REMOTE, self.config) == pytest.approx(1.15)
        assert context_multiplier(film_seeker, view(make_firm()), REMOTE, self.config) == 1.0

    def test_bonuses_stack_up_to_cap(self):
        film_seeker = make_seeker(stage="Seed", industries=["Film"])
        film_office = view(make_firm(description="Film fund", firm_type="Family Office"))

        uncapped = context_multiplier(film_seeker, film_office, LOCAL, self.config)
        assert uncapped == pytest.approx(1.10 * 1.05 * 1.15)

        capped = context_multiplier(film_seeker, film_office, LOCAL, MultiplierConfig(context_cap=1.2))
        assert capped == pytest.approx(1.2)


class TestActivityMultiplier:

    def test_firm_completeness(self):
        assert activity_multiplier(view(make_firm()), MultiplierConfig()) == pytest.approx(1.15)

        bare = view(make_firm(website=None, description="Short", sectors=[]))
        assert activity_multiplier(bare, MultiplierConfig()) == 1.0

    def test_individual_completeness(self):
        assert activity_multiplier(view(make_investor()), MultiplierConfig()) == pytest.approx(1.10)
        assert activity_multiplier(view(make_investor(email=None)), MultiplierConfig()) == pytest.approx(1.05)

    def test_capped(self):
        assert activity_multiplier(view(make_firm()), MultiplierConfig(activity_step=0.2)) == pytest.approx(1.3)


class TestFinalScore:

    @pytest.mark.parametrize("adjusted,context,activity,expected", [
        (71, 1.1, 1.15, 90),
        (100, 1.5, 1.3, 100),
        (0, 1.5, 1.3, 0),
        (50, 1.0, 1.0, 50),
    ])
    def test_final_score_bounded(self, adjusted, context, activity, expected):
        assert final_score(adjusted, context, activity) == expected
