#!/usr/bin/env python3
"""
Generic Domain Scorer - Weighted reuse of the criteria breakdown.

Used for every domain without a bespoke scorer. Each domain has its own
weight table over six categories mapped onto breakdown fields:

    semantic       -> semantic_fit
    stage          -> stage_compatibility
    market         -> geographic_practicality
    check_size     -> economic_fit
    investor_type  -> investor_type_logic
    deal_structure -> no breakdown field, neutral 70

Weight tables can be overridden per domain through matching.domain_weights.
"""

import logging
from types import MappingProxyType

from core.config_loader import GenericDomainWeights
from core.matching.classifier import DomainTag
from core.matching.domains.base import DomainScorer, label
from core.matching.models import CriteriaBreakdown, DomainScore, ProviderView, Seeker

logger = logging.getLogger(__name__)

NEUTRAL_DEAL_STRUCTURE = 70.0
STRONG_SECTOR_SCORE = 75

DEFAULT_WEIGHTS = GenericDomainWeights()

DOMAIN_WEIGHT_TABLES = MappingProxyType({
    DomainTag.DIGITAL_HEALTH: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.20, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.CYBERSECURITY: GenericDomainWeights(
        semantic=0.35, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.FINTECH: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.10),
    DomainTag.ENTERPRISE_SAAS: GenericDomainWeights(
        semantic=0.30, stage=0.25, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.FASHION: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.20, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.BEAUTY: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.20, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.FOOD_BEVERAGE: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.20, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.MANUFACTURING: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.15, check_size=0.20, investor_type=0.10, deal_structure=0.05),
    DomainTag.LOGISTICS: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.20, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.CLEANTECH: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.10),
    DomainTag.SUSTAINABLE_MATERIALS: GenericDomainWeights(
        semantic=0.35, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.EDTECH: GenericDomainWeights(
        semantic=0.30, stage=0.25, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05),
    DomainTag.GOVTECH: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.20, check_size=0.10, investor_type=0.10, deal_structure=0.10),
    DomainTag.WEALTH_MANAGEMENT: GenericDomainWeights(
        semantic=0.30, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.10),
    DomainTag.GAMING: GenericDomainWeights(
        semantic=0.35, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05),
})


class GenericDomainScorer(DomainScorer):
    """Fallback scorer; the domain tag is bound per instance."""

    @property
    def weights(self) -> GenericDomainWeights:
        override = self.config.domain_weights.get(self.domain.value)
        if override is not None:
            return override
        return DOMAIN_WEIGHT_TABLES.get(self.domain, DEFAULT_WEIGHTS)

    def score(self, seeker: Seeker, provider: ProviderView, breakdown: CriteriaBreakdown) -> DomainScore:
        weights = self.weights
        total = (
            breakdown.semantic_fit * weights.semantic
            + breakdown.stage_compatibility * weights.stage
            + breakdown.geographic_practicality * weights.market
            + breakdown.economic_fit * weights.check_size
            + breakdown.investor_type_logic * weights.investor_type
            + NEUTRAL_DEAL_STRUCTURE * weights.deal_structure
        )
        score = max(0, min(100, round(total)))

        reasons = ()
        if self.domain != DomainTag.GENERAL and score >= STRONG_SECTOR_SCORE:
            reasons = (f"Strong {label(self.domain)} sector fit",)

        return DomainScore(domain=self.domain.value, score=float(score), multiplier=1.0, reasons=reasons)
