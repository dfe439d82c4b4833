#!/usr/bin/env python3
"""Consumer packaged goods taxonomy: product category, retail footprint and channel."""

from types import MappingProxyType

from core.matching.classifier import DomainTag
from core.matching.domains.weighted import CategoryWeights, DomainTaxonomy, WeightedDomainScorer

CPG_TAXONOMY = DomainTaxonomy(
    technology_label="Product category",
    technologies=MappingProxyType({
        "food": ("food", "snack", "snacks", "plant-based"),
        "beverage": ("beverage", "drink", "coffee", "tea"),
        "personal_care": ("personal care", "skincare", "hygiene"),
        "household": ("household", "cleaning"),
        "pet": ("pet", "pet food"),
        "supplements": ("supplement", "vitamins", "nutrition"),
    }),
    # Retail footprint ladder
    stage_ladder=(
        ("launch", ("pre-launch", "test market", "launch")),
        ("dtc", ("direct to consumer", "e-commerce", "online sales")),
        ("regional_retail", ("regional retail", "specialty retail", "natural grocery", "whole foods")),
        ("national_retail", ("national retail", "national distribution", "walmart", "costco", "kroger")),
        ("international", ("international expansion", "export")),
    ),
    markets=MappingProxyType({
        "dtc": ("dtc", "direct to consumer", "amazon"),
        "grocery": ("grocery", "supermarket"),
        "mass": ("mass retail", "big box", "walmart", "costco"),
        "foodservice": ("foodservice", "food service", "restaurants"),
        "specialty": ("specialty", "boutique", "natural channel"),
        "convenience": ("convenience", "c-store"),
    }),
    investor_types=MappingProxyType({
        "Family Office": 85, "Growth Equity": 85, "CVC": 85, "PE": 80,
        "VC": 70, "Angel": 70, "Accelerator": 60,
    }),
    structures=("royalty", "revenue share", "inventory financing", "purchase order financing", "working capital"),
    weights=CategoryWeights(
        technology=0.30, stage=0.25, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05,
    ),
    min_check_size_overlap=0.25,
)


class CpgDomainScorer(WeightedDomainScorer):
    domain = DomainTag.CPG
    taxonomy = CPG_TAXONOMY
