#!/usr/bin/env python3
"""
Weighted-category scorer shared by the taxonomy-driven domains
(biotech, medtech, deeptech, saas, cpg).

Each domain supplies a DomainTaxonomy: keyword tables for its technology
categories, an ordered development-stage ladder, target markets, investor
type affinities, deal-structure vocabulary, category weights and the
minimum check-size overlap below which the pairing is auto-rejected.

Categories:
- technology: shared categories between seeker and provider text
- stage: distance on the development ladder (adjacent rungs partially fit)
- market: shared target markets
- check_size: economic fit from the criteria breakdown
- investor_type: affinity of the canonical investor type
- deal_structure: bonus when both sides speak the same structure vocabulary

Categories neither side describes fall back to the matching criteria
breakdown factor, or to a neutral score when there is none.
"""

from dataclasses import dataclass
from typing import List, Mapping, Sequence, Tuple

from core.matching.check_size import check_size_overlap
from core.matching.constants import canonical_investor_type
from core.matching.domains.base import DomainScorer, KeywordTable, detect_all, ladder_positions
from core.matching.models import CriteriaBreakdown, DomainScore, ProviderView, Seeker
from core.matching.text import any_keyword, contains_keyword

NEUTRAL_MARKET_SCORE = 60.0
NEUTRAL_STRUCTURE_SCORE = 70.0
PROVIDER_STRUCTURE_SCORE = 80.0
STRONG_CATEGORY_SCORE = 80.0

LADDER_DISTANCE_SCORES = {0: 100.0, 1: 70.0}
LADDER_FAR_SCORE = 35.0


@dataclass(frozen=True)
class CategoryWeights:
    technology: float
    stage: float
    market: float
    check_size: float
    investor_type: float
    deal_structure: float

    def __post_init__(self):
        total = (self.technology + self.stage + self.market + self.check_size
                 + self.investor_type + self.deal_structure)
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"category weights must sum to 1.0, got {total:.4f}")


@dataclass(frozen=True)
class DomainTaxonomy:
    technology_label: str
    technologies: KeywordTable
    stage_ladder: Sequence[Tuple[str, Tuple[str, ...]]]
    markets: KeywordTable
    investor_types: Mapping[str, float]
    structures: Tuple[str, ...]
    weights: CategoryWeights
    min_check_size_overlap: float


class WeightedDomainScorer(DomainScorer):
    """Scores one domain from its taxonomy. Subclasses set domain and taxonomy."""

    taxonomy: DomainTaxonomy
    mismatch_score = 30.0
    mismatch_multiplier = 0.6

    def score(self, seeker: Seeker, provider: ProviderView, breakdown: CriteriaBreakdown) -> DomainScore:
        taxonomy = self.taxonomy
        overlap = check_size_overlap(seeker, provider, self.config.constraints)
        if overlap < taxonomy.min_check_size_overlap:
            return self.reject(
                f"Check size overlap below {taxonomy.min_check_size_overlap:.0%} threshold - auto-reject"
            )

        seeker_text = f"{seeker.industry_text} {seeker.description_text}"
        provider_text = provider.text_profile

        categories = (
            (f"{taxonomy.technology_label} fit",
             _overlap_score(seeker_text, provider_text, taxonomy.technologies, breakdown.semantic_fit),
             taxonomy.weights.technology),
            ("Development stage fit",
             _ladder_score(seeker_text, provider_text, taxonomy.stage_ladder, breakdown.stage_compatibility),
             taxonomy.weights.stage),
            ("Target market fit",
             _overlap_score(seeker_text, provider_text, taxonomy.markets, NEUTRAL_MARKET_SCORE),
             taxonomy.weights.market),
            ("Check size",
             breakdown.economic_fit,
             taxonomy.weights.check_size),
            ("Investor type",
             _investor_type_score(provider, taxonomy.investor_types, breakdown.investor_type_logic),
             taxonomy.weights.investor_type),
            ("Deal structure",
             _structure_score(seeker_text, provider_text, taxonomy.structures),
             taxonomy.weights.deal_structure),
        )

        reasons: List[str] = []
        total = 0.0
        for name, value, weight in categories:
            total += value * weight
            if value >= STRONG_CATEGORY_SCORE and weight >= 0.1:
                reasons.append(f"Strong {name.lower()}")

        score = max(0, min(100, round(total)))
        return DomainScore(domain=self.domain.value, score=float(score), multiplier=1.0,
                           reasons=tuple(reasons))


def _overlap_score(seeker_text: str, provider_text: str, table: KeywordTable, fallback: float) -> float:
    seeker_categories = detect_all(seeker_text, table)
    provider_categories = detect_all(provider_text, table)
    if not seeker_categories or not provider_categories:
        return float(fallback)

    shared = seeker_categories & provider_categories
    if not shared:
        return 35.0
    return 70.0 + 30.0 * len(shared) / len(seeker_categories)


def _ladder_score(
    seeker_text: str,
    provider_text: str,
    ladder: Sequence[Tuple[str, Tuple[str, ...]]],
    fallback: float
) -> float:
    seeker_positions = ladder_positions(seeker_text, ladder)
    provider_positions = ladder_positions(provider_text, ladder)
    if not seeker_positions or not provider_positions:
        return float(fallback)

    # The most advanced rung the seeker mentions is where it stands
    seeker_position = seeker_positions[-1]
    distance = min(abs(seeker_position - p) for p in provider_positions)
    return LADDER_DISTANCE_SCORES.get(distance, LADDER_FAR_SCORE)


def _investor_type_score(provider: ProviderView, affinities: Mapping[str, float], fallback: float) -> float:
    canonical = canonical_investor_type(provider.investor_type)
    if canonical in affinities:
        return float(affinities[canonical])
    return float(fallback)


def _structure_score(seeker_text: str, provider_text: str, structures: Tuple[str, ...]) -> float:
    provider_terms = {term for term in structures if contains_keyword(provider_text, term)}
    if not provider_terms:
        return NEUTRAL_STRUCTURE_SCORE
    if any_keyword(seeker_text, provider_terms):
        return 100.0
    return PROVIDER_STRUCTURE_SCORE
