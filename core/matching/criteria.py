#!/usr/bin/env python3
"""
Criteria Scorer - Seven-factor breakdown and weighted base score.

Factors (each in [0, 100]):
- semantic_fit: token Jaccard over both text profiles plus thesis-cluster bonus
- stage_compatibility: stage distance 0/1/2/3+ -> 100/70/40/20
- economic_fit: 30 + 70 x check-size overlap, capped by AUM sanity checks
- geographic_practicality: city, global reach, macro-region, containment
- investor_behavior: portfolio size, recency and contact completeness
- investor_type_logic: stage x investor-type affinity table
- network_warmth: neutral constant (no relationship graph is available)

base_score = round(sum(factor x weight)) with weights from CriteriaWeights.
"""

import logging
from typing import List, Tuple

from core.config_loader import ConstraintConfig, MatchingConfig
from core.matching.check_size import check_size_overlap, parse_amount
from core.matching.constants import (
    THESIS_CLUSTERS, THESIS_CLUSTER_CAP, THESIS_TOTAL_CAP, THESIS_POINTS_PER_HIT,
    GLOBAL_LOCATION_TERMS, REGION_COUNTRIES, STAGE_TYPE_AFFINITY, NEUTRAL_TYPE_AFFINITY,
    canonical_investor_type,
)
from core.matching.models import CriteriaBreakdown, ProviderView, Seeker
from core.matching.stages import normalize_stage, stage_distance
from core.matching.text import (
    any_keyword, count_keyword_hits, jaccard_similarity, tokenize,
)

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50.0
NETWORK_WARMTH_NEUTRAL = 50.0
SEMANTIC_SIMILARITY_POINTS = 70

STAGE_DISTANCE_SCORES = {0: 100.0, 1: 70.0, 2: 40.0}
STAGE_DISTANCE_FLOOR = 20.0

ECONOMIC_FLOOR = 30.0
ECONOMIC_OVERLAP_POINTS = 70.0
# target / AUM below the first ratio is too small for the fund, above the second too big
AUM_SMALL_RATIO, AUM_SMALL_CAP = 0.01, 60.0
AUM_LARGE_RATIO, AUM_LARGE_CAP = 0.1, 50.0

GEO_EXACT, GEO_REGION, GEO_FAR = 100.0, 90.0, 30.0


def score_criteria(
    seeker: Seeker,
    provider: ProviderView,
    config: MatchingConfig
) -> Tuple[CriteriaBreakdown, int]:
    """
    Compute the seven-factor breakdown and the weighted base score.

    Returns: (breakdown, base_score)
    """
    breakdown = CriteriaBreakdown(
        semantic_fit=semantic_fit(seeker, provider),
        stage_compatibility=stage_compatibility(seeker, provider),
        economic_fit=economic_fit(seeker, provider, config.constraints),
        geographic_practicality=geographic_practicality(seeker, provider),
        investor_behavior=investor_behavior(provider),
        investor_type_logic=investor_type_logic(seeker, provider),
        network_warmth=network_warmth(seeker, provider),
    )
    return breakdown, base_score(breakdown, config)


def base_score(breakdown: CriteriaBreakdown, config: MatchingConfig) -> int:
    weights = config.weights.model_dump()
    factors = breakdown.as_dict()
    return int(round(sum(factors[name] * weight for name, weight in weights.items())))


def semantic_fit(seeker: Seeker, provider: ProviderView) -> float:
    seeker_text = seeker.text_profile
    provider_text = provider.text_profile
    if not seeker_text or not provider_text:
        return NEUTRAL_SCORE

    similarity = jaccard_similarity(tokenize(seeker_text), tokenize(provider_text))
    bonus = thesis_bonus(seeker_text, provider_text)
    return float(min(100, round(similarity * SEMANTIC_SIMILARITY_POINTS + bonus)))


def thesis_bonus(seeker_text: str, provider_text: str) -> int:
    """Bonus for every thesis cluster both sides mention, capped per cluster and in total."""
    bonus = 0
    for keywords in THESIS_CLUSTERS.values():
        seeker_hits = count_keyword_hits(seeker_text, keywords)
        provider_hits = count_keyword_hits(provider_text, keywords)
        if seeker_hits and provider_hits:
            bonus += min(THESIS_CLUSTER_CAP, (seeker_hits + provider_hits) * THESIS_POINTS_PER_HIT)
    return min(THESIS_TOTAL_CAP, bonus)


def stage_compatibility(seeker: Seeker, provider: ProviderView) -> float:
    distance = stage_distance(seeker.stage, provider.stages)
    return STAGE_DISTANCE_SCORES.get(distance, STAGE_DISTANCE_FLOOR)


def economic_fit(seeker: Seeker, provider: ProviderView, constraints: ConstraintConfig) -> float:
    overlap = check_size_overlap(seeker, provider, constraints)
    score = ECONOMIC_FLOOR + overlap * ECONOMIC_OVERLAP_POINTS

    aum = parse_amount(provider.aum)
    target = seeker.target
    if aum and target:
        ratio = target / aum
        if ratio < AUM_SMALL_RATIO:
            score = min(score, AUM_SMALL_CAP)
        elif ratio > AUM_LARGE_RATIO:
            score = min(score, AUM_LARGE_CAP)

    return float(round(score))


def geographic_practicality(seeker: Seeker, provider: ProviderView) -> float:
    """
    Soft geographic score.

    Order: missing data (50), global provider (100), same city (100),
    same macro-region (90), one location containing the other (100), else 30.
    """
    seeker_location = (seeker.location or "").strip().lower()
    provider_locations = provider.locations
    if not seeker_location or not provider_locations:
        return NEUTRAL_SCORE

    if any(any_keyword(loc, GLOBAL_LOCATION_TERMS) for loc in provider_locations):
        return GEO_EXACT

    seeker_city = _city(seeker_location)
    if any(_city(loc) == seeker_city for loc in provider_locations):
        return GEO_EXACT

    for region, countries in REGION_COUNTRIES.items():
        seeker_in_region = any_keyword(seeker_location, countries) or region in seeker_location
        provider_in_region = any(
            any_keyword(loc, countries) or region in loc for loc in provider_locations
        )
        if seeker_in_region and provider_in_region:
            return GEO_REGION

    for loc in provider_locations:
        if loc in seeker_location or seeker_location in loc:
            return GEO_EXACT

    return GEO_FAR


def _city(location: str) -> str:
    return location.split(",")[0].strip()


def investor_behavior(provider: ProviderView) -> float:
    score = 70.0

    if provider.is_firm:
        if provider.portfolio_count > 0:
            score += min(15, provider.portfolio_count)

        days = provider.days_since_update
        if days is not None:
            if days < 30:
                score += 15
            elif days < 90:
                score += 10
            elif days > 180:
                score -= 10
    else:
        if provider.has_email:
            score += 5
        if provider.has_linkedin:
            score += 5

    return max(0.0, min(100.0, score))


def investor_type_logic(seeker: Seeker, provider: ProviderView) -> float:
    affinities = STAGE_TYPE_AFFINITY.get(normalize_stage(seeker.stage))
    if not affinities:
        return float(NEUTRAL_TYPE_AFFINITY)
    canonical = canonical_investor_type(provider.investor_type)
    return float(affinities.get(canonical, NEUTRAL_TYPE_AFFINITY))


def network_warmth(seeker: Seeker, provider: ProviderView) -> float:
    # Extension point for a relationship-graph signal; neutral until one exists
    return NETWORK_WARMTH_NEUTRAL


def generate_reasons(breakdown: CriteriaBreakdown, provider: ProviderView) -> List[str]:
    """Human-readable reasons derived from the breakdown thresholds."""
    reasons = []

    if breakdown.semantic_fit >= 70:
        reasons.append("Strong thesis alignment")
    elif breakdown.semantic_fit >= 50:
        reasons.append("Moderate sector fit")

    if breakdown.stage_compatibility >= 90:
        reasons.append("Perfect stage match")
    elif breakdown.stage_compatibility >= 70:
        reasons.append("Compatible investment stage")

    if breakdown.economic_fit >= 80:
        reasons.append("Check size aligned with target")

    if breakdown.geographic_practicality >= 80:
        reasons.append("Geographic alignment")

    if breakdown.investor_behavior >= 80:
        reasons.append("Active investor profile")

    if breakdown.investor_type_logic >= 80:
        reasons.append("Investor type fits stage")

    if not reasons and provider.display_name:
        reasons.append(f"Potential match with {provider.display_name}")

    return reasons
