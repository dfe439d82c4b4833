#!/usr/bin/env python3
"""
Static lookup tables shared by the criteria scorer and the multipliers.

Every table is immutable; scorers receive them by reference and never
mutate them.
"""

from types import MappingProxyType
from typing import Optional, Tuple

from core.matching.text import contains_keyword

# Thesis clusters: both sides hitting the same cluster earns a semantic bonus
THESIS_CLUSTERS = MappingProxyType({
    "film_finance": (
        "film", "movie", "entertainment", "content", "media", "studio",
        "production", "slate", "gap financing", "completion bond",
    ),
    "real_estate": (
        "real estate", "property", "commercial", "residential", "multifamily",
        "construction", "development", "reit",
    ),
    "deeptech": (
        "deeptech", "deep tech", "ai", "machine learning", "robotics", "quantum",
        "biotech", "hardware",
    ),
    "climate": (
        "climate", "cleantech", "sustainability", "renewable", "carbon", "energy", "esg",
    ),
    "fintech": (
        "fintech", "payments", "banking", "insurance", "lending", "defi", "crypto",
    ),
})

THESIS_CLUSTER_CAP = 15
THESIS_TOTAL_CAP = 30
THESIS_POINTS_PER_HIT = 3

GLOBAL_LOCATION_TERMS: Tuple[str, ...] = ("global", "worldwide", "international", "any")

REGION_COUNTRIES = MappingProxyType({
    "europe": (
        "uk", "united kingdom", "germany", "france", "netherlands", "spain", "italy",
        "sweden", "denmark", "norway", "finland", "belgium", "austria", "switzerland",
        "ireland", "portugal", "poland", "eu", "european",
    ),
    "north america": ("usa", "united states", "us", "canada", "mexico", "american"),
    "asia": (
        "china", "japan", "korea", "india", "singapore", "hong kong", "taiwan",
        "thailand", "vietnam", "indonesia", "malaysia", "philippines", "asian",
    ),
    "middle east": ("uae", "dubai", "saudi", "qatar", "israel", "bahrain", "kuwait", "oman"),
})

# Canonical investor types, most specific first ("corporate venture" before "venture")
INVESTOR_TYPE_ALIASES = MappingProxyType({
    "Family Office": ("family office",),
    "Growth Equity": ("growth equity", "growth fund"),
    "Hedge Fund": ("hedge fund",),
    "Accelerator": ("accelerator", "incubator"),
    "CVC": ("cvc", "corporate venture", "corporate vc"),
    "PE": ("private equity", "pe", "buyout"),
    "VC": ("venture capital", "vc", "venture"),
    "Angel": ("angel",),
})

STAGE_TYPE_AFFINITY = MappingProxyType({
    "pre-seed": MappingProxyType({"Angel": 100, "Family Office": 80, "VC": 60, "Accelerator": 100}),
    "seed": MappingProxyType({"Angel": 80, "Family Office": 85, "VC": 90, "Accelerator": 70}),
    "series-a": MappingProxyType({"VC": 100, "Family Office": 75, "PE": 50, "CVC": 80}),
    "series-b": MappingProxyType({"VC": 100, "Growth Equity": 80, "PE": 70, "CVC": 85}),
    "series-c": MappingProxyType({"VC": 80, "Growth Equity": 100, "PE": 90, "CVC": 75}),
    "growth": MappingProxyType({"Growth Equity": 100, "PE": 95, "VC": 60, "Hedge Fund": 70}),
})

NEUTRAL_TYPE_AFFINITY = 50

NICHE_INDUSTRIES: Tuple[str, ...] = ("film", "movie", "entertainment", "real estate", "sports")


def canonical_investor_type(investor_type: Optional[str]) -> str:
    """Map free-text investor type onto a canonical name, "" if unknown.

    >>> canonical_investor_type("Venture Capital")
    'VC'
    """
    if not investor_type:
        return ""
    lower = investor_type.lower()
    for canonical, aliases in INVESTOR_TYPE_ALIASES.items():
        if any(contains_keyword(lower, alias) for alias in aliases):
            return canonical
    return ""
