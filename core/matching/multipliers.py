#!/usr/bin/env python3
"""
Multipliers - Domain blending plus context and activity multipliers.

final = min(100, round(adjusted x context x activity)) where adjusted is
round(base x 0.4 + domain x 0.6) by default.
"""

from core.config_loader import BlendConfig, MultiplierConfig
from core.matching.constants import NICHE_INDUSTRIES, canonical_investor_type
from core.matching.models import CriteriaBreakdown, ProviderView, Seeker
from core.matching.stages import is_early_stage
from core.matching.text import any_keyword


def blend_scores(base_score: int, domain_score: float, config: BlendConfig) -> int:
    return int(round(base_score * config.base_weight + domain_score * config.domain_weight))


def context_multiplier(
    seeker: Seeker,
    provider: ProviderView,
    breakdown: CriteriaBreakdown,
    config: MultiplierConfig
) -> float:
    """
    Contextual bonus, capped at config.context_cap.

    - Early-stage seeker with strong geographic practicality
    - Family-office provider
    - Both sides in a niche industry
    """
    multiplier = 1.0

    if is_early_stage(seeker.stage) and breakdown.geographic_practicality > config.early_stage_geo_threshold:
        multiplier *= config.early_stage_local_bonus

    if canonical_investor_type(provider.investor_type) == "Family Office":
        multiplier *= config.family_office_bonus

    if any_keyword(seeker.industry_text, NICHE_INDUSTRIES) and any_keyword(provider.text_profile, NICHE_INDUSTRIES):
        multiplier *= config.niche_industry_bonus

    return min(config.context_cap, multiplier)


def activity_multiplier(provider: ProviderView, config: MultiplierConfig) -> float:
    """One additive step per completeness signal, capped at config.activity_cap."""
    if provider.is_firm:
        signals = (provider.has_website, provider.has_long_description, provider.has_sectors)
    else:
        signals = (provider.has_linkedin, provider.has_email)
    return min(config.activity_cap, 1.0 + sum(signals) * config.activity_step)


def final_score(adjusted_score: int, context: float, activity: float) -> int:
    return max(0, min(100, int(round(adjusted_score * context * activity))))
