#!/usr/bin/env python3
"""Deep tech taxonomy: core technology, R&D maturity and end market."""

from types import MappingProxyType

from core.matching.classifier import DomainTag
from core.matching.domains.weighted import CategoryWeights, DomainTaxonomy, WeightedDomainScorer

DEEPTECH_TAXONOMY = DomainTaxonomy(
    technology_label="Technology thesis",
    technologies=MappingProxyType({
        "ai": ("artificial intelligence", "machine learning", "ai", "computer vision", "llm"),
        "quantum": ("quantum",),
        "robotics": ("robotics", "autonomous", "drone"),
        "semiconductors": ("semiconductor", "chip", "photonics"),
        "web3": ("blockchain", "web3", "defi", "smart contract", "crypto"),
        "space": ("space tech", "satellite", "aerospace"),
        "materials": ("advanced materials", "nanotech", "materials science"),
    }),
    stage_ladder=(
        ("research", ("research", "university spinout", "spin-out", "lab-stage")),
        ("prototype", ("prototype", "proof of concept", "poc")),
        ("pilot", ("pilot", "beta", "design partner")),
        ("commercial", ("commercial", "paying customers", "revenue")),
        ("scaling", ("scaling", "scale-up", "mass production")),
    ),
    markets=MappingProxyType({
        "defense": ("defense", "defence", "national security"),
        "industrial": ("industrial", "manufacturing"),
        "enterprise": ("enterprise", "b2b"),
        "mobility": ("mobility", "automotive"),
        "energy": ("energy", "grid"),
        "healthcare": ("healthcare", "life sciences"),
        "finance": ("financial", "trading"),
    }),
    investor_types=MappingProxyType({
        "VC": 95, "CVC": 85, "Accelerator": 70, "Family Office": 65,
        "Angel": 60, "Growth Equity": 60, "Hedge Fund": 55, "PE": 40,
    }),
    structures=("grant", "non-dilutive", "sbir", "token", "safe", "convertible"),
    weights=CategoryWeights(
        technology=0.35, stage=0.20, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05,
    ),
    min_check_size_overlap=0.15,
)


class DeeptechDomainScorer(WeightedDomainScorer):
    domain = DomainTag.DEEPTECH
    taxonomy = DEEPTECH_TAXONOMY
