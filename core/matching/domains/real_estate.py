#!/usr/bin/env python3
"""
Real Estate Domain Scorer.

Weighted categories:
- Property type fit: 30%
- Deal stage fit: 25%
- Geography: 20%
- Check size: 15% (overlap below 50% is an auto-reject)
- Investor type: 10%

An equity-vs-debt structure mismatch and recent activity adjust the
multiplier.
"""

from types import MappingProxyType
from typing import List, Optional, Tuple

from core.matching.check_size import check_size_overlap
from core.matching.classifier import DomainTag
from core.matching.domains.base import DomainScorer, detect_all, detect_first, is_adjacent
from core.matching.models import CriteriaBreakdown, DomainScore, ProviderView, Seeker
from core.matching.text import any_keyword

MIN_CHECK_SIZE_OVERLAP = 0.50

WEIGHT_PROPERTY_TYPE = 0.30
WEIGHT_DEAL_STAGE = 0.25
WEIGHT_GEOGRAPHY = 0.20
WEIGHT_CHECK_SIZE = 0.15
WEIGHT_INVESTOR_TYPE = 0.10

PROPERTY_TYPES = MappingProxyType({
    "residential": ("residential", "housing", "homes", "apartments"),
    "commercial": ("commercial", "office", "retail", "shopping"),
    "industrial": ("industrial", "warehouse", "logistics", "manufacturing"),
    "multifamily": ("multifamily", "multi-family", "apartment complex"),
    "mixed-use": ("mixed-use", "mixed use", "live-work"),
    "hospitality": ("hotel", "hospitality", "resort", "lodging"),
    "development": ("development", "ground-up", "new construction"),
})

DEAL_STAGES = MappingProxyType({
    "pre-development": ("pre-development", "entitlement", "planning", "zoning"),
    "construction": ("construction", "building", "ground-up"),
    "stabilized": ("stabilized", "cash-flowing", "income-producing", "occupied"),
    "bridge": ("bridge", "transitional"),
    "value-add": ("value-add", "value add", "repositioning"),
    "acquisition": ("acquisition", "purchase", "buying"),
})

ADJACENT_DEAL_STAGES = (
    ("pre-development", "construction"),
    ("construction", "bridge"),
    ("bridge", "stabilized"),
    ("acquisition", "value-add"),
)

# Investor type -> project vocabulary that suits it
TYPE_AFFINITY: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (("family office",), ("flexible", "bridge", "development", "stabilized")),
    (("debt fund", "credit fund", "lender"), ("debt", "loan", "bridge", "mezzanine")),
    (("reit",), ("stabilized", "income", "cash-flowing", "portfolio")),
    (("vc", "venture capital"), ("early", "development", "proptech", "technology")),
    (("pe", "private equity"), ("stabilized", "large", "portfolio", "value-add")),
)

NATIONWIDE_TERMS = ("global", "nationwide")
RECENT_ACTIVITY_TERMS = ("active", "recent", "portfolio")


class RealEstateDomainScorer(DomainScorer):
    domain = DomainTag.REAL_ESTATE

    def score(self, seeker: Seeker, provider: ProviderView, breakdown: CriteriaBreakdown) -> DomainScore:
        overlap = check_size_overlap(seeker, provider, self.config.constraints)
        if overlap < MIN_CHECK_SIZE_OVERLAP:
            return self.reject(
                f"Check size overlap below {MIN_CHECK_SIZE_OVERLAP:.0%} threshold - auto-reject"
            )

        reasons: List[str] = []
        score = 0.0

        property_score = property_type_fit(seeker, provider)
        score += property_score * WEIGHT_PROPERTY_TYPE
        if property_score >= 80:
            reasons.append("Strong property type alignment")

        stage_score = deal_stage_fit(seeker, provider)
        score += stage_score * WEIGHT_DEAL_STAGE
        if stage_score >= 80:
            reasons.append("Deal stage compatibility")

        geo_score = market_geography(seeker, provider)
        score += geo_score * WEIGHT_GEOGRAPHY
        if geo_score >= 80:
            reasons.append("Geographic market alignment")

        score += overlap * 100 * WEIGHT_CHECK_SIZE
        if overlap >= 0.8:
            reasons.append("Check size well aligned")

        type_score = investor_type_fit(seeker, provider)
        score += type_score * WEIGHT_INVESTOR_TYPE
        if type_score >= 80:
            reasons.append("Investor type fits deal")

        multiplier, structure_reason = structure_multiplier(seeker, provider)
        if structure_reason:
            reasons.append(structure_reason)

        if any_keyword(provider.text_profile, RECENT_ACTIVITY_TERMS):
            multiplier *= 1.10
            reasons.append("Active in real estate deals")

        final = max(0, min(100, round(score * multiplier)))
        return DomainScore(domain=self.domain.value, score=float(final), multiplier=multiplier,
                           reasons=tuple(reasons))


def property_type_fit(seeker: Seeker, provider: ProviderView) -> float:
    seeker_types = detect_all(f"{seeker.industry_text} {seeker.description_text}", PROPERTY_TYPES)
    provider_types = detect_all(provider.text_profile, PROPERTY_TYPES)
    if not seeker_types or not provider_types:
        return 60.0
    return 100.0 if seeker_types & provider_types else 50.0


def deal_stage_fit(seeker: Seeker, provider: ProviderView) -> float:
    seeker_stage = detect_first(seeker.description_text, DEAL_STAGES)
    provider_stage = detect_first(provider.text_profile, DEAL_STAGES)

    if seeker_stage == provider_stage and seeker_stage != "general":
        return 100.0
    if provider_stage == "general":
        return 70.0
    if is_adjacent(seeker_stage, provider_stage, ADJACENT_DEAL_STAGES):
        return 80.0
    return 40.0


def market_geography(seeker: Seeker, provider: ProviderView) -> float:
    if any_keyword(provider.text_profile, NATIONWIDE_TERMS):
        return 100.0

    seeker_location = (seeker.location or "").strip().lower()
    provider_location = provider.primary_location
    if not seeker_location or not provider_location:
        return 70.0

    if _city(seeker_location) == _city(provider_location):
        return 100.0
    if _country(seeker_location) == _country(provider_location):
        return 80.0
    return 50.0


def _city(location: str) -> str:
    return location.split(",")[0].strip()


def _country(location: str) -> str:
    return location.split(",")[-1].strip()


def investor_type_fit(seeker: Seeker, provider: ProviderView) -> float:
    investor_type = provider.investor_type.lower()
    for kinds, keywords in TYPE_AFFINITY:
        if any_keyword(investor_type, kinds):
            return 100.0 if any_keyword(seeker.description_text, keywords) else 60.0
    return 50.0


def structure_multiplier(seeker: Seeker, provider: ProviderView) -> Tuple[float, Optional[str]]:
    seeker_text = seeker.description_text
    provider_text = provider.text_profile

    offers_equity = any_keyword(seeker_text, ("equity", "ownership"))
    offers_debt = any_keyword(seeker_text, ("debt", "loan"))
    prefers_debt = any_keyword(provider_text, ("debt", "lending"))
    prefers_equity = any_keyword(provider_text, ("equity", "ownership"))

    if offers_equity and prefers_debt and not prefers_equity:
        return 0.6, "Structure mismatch: equity offered, debt preferred"
    if offers_debt and prefers_equity and not prefers_debt:
        return 0.8, "Structure mismatch: debt offered, equity preferred"
    return 1.0, None
