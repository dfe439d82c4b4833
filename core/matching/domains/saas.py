#!/usr/bin/env python3
"""SaaS taxonomy: product category, ARR milestones and customer segment."""

from types import MappingProxyType

from core.matching.classifier import DomainTag
from core.matching.domains.weighted import CategoryWeights, DomainTaxonomy, WeightedDomainScorer

SAAS_TAXONOMY = DomainTaxonomy(
    technology_label="Product",
    technologies=MappingProxyType({
        "vertical": ("vertical saas", "vertical software", "industry-specific"),
        "horizontal": ("horizontal", "productivity", "collaboration"),
        "devtools": ("developer tools", "devops", "api"),
        "data": ("data infrastructure", "analytics", "data platform"),
        "security": ("security", "identity"),
        "ai": ("ai", "machine learning", "copilot", "llm"),
        "go_to_market": ("marketing", "sales enablement", "crm"),
    }),
    # ARR ladder
    stage_ladder=(
        ("pre_revenue", ("pre-revenue", "mvp", "private beta")),
        ("early_revenue", ("first customers", "early revenue", "pilot customers", "design partners")),
        ("product_market_fit", ("product-market fit", "pmf", "$1m arr", "1m arr")),
        ("scaling", ("scaling", "$5m arr", "5m arr", "go-to-market")),
        ("growth", ("$10m arr", "10m arr", "profitable", "rule of 40")),
    ),
    markets=MappingProxyType({
        "smb": ("smb", "small business", "small businesses", "sme"),
        "mid_market": ("mid-market", "midmarket"),
        "enterprise": ("enterprise", "fortune 500"),
        "prosumer": ("prosumer", "freelancer", "creator"),
        "public_sector": ("government", "public sector"),
    }),
    investor_types=MappingProxyType({
        "VC": 95, "Growth Equity": 85, "CVC": 75, "Angel": 70,
        "Accelerator": 70, "Family Office": 65, "PE": 60,
    }),
    structures=("revenue-based", "revenue based financing", "venture debt", "recurring revenue", "arr"),
    weights=CategoryWeights(
        technology=0.30, stage=0.25, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05,
    ),
    min_check_size_overlap=0.25,
)


class SaasDomainScorer(WeightedDomainScorer):
    domain = DomainTag.SAAS
    taxonomy = SAAS_TAXONOMY
