#!/usr/bin/env python3
"""
Domain Classifier - Tag seekers and providers with an industry vertical.

Keyword families live in data/domain_keywords.yaml and are loaded once.
Both classify() and classify_provider() share one hit-counting routine;
only the thresholds differ:
- Seeker: any strong keyword, or at least two supporting keywords
- Provider: at least two supporting hits, where strong keywords also count
  as supporting (a provider has no single-keyword shortcut)

The first family in file order that meets its threshold wins.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Tuple

import yaml

from core.matching.models import ProviderView, Seeker
from core.matching.text import count_keyword_hits

logger = logging.getLogger(__name__)

KEYWORDS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "domain_keywords.yaml")

SEEKER_SUPPORTING_THRESHOLD = 2
PROVIDER_HIT_THRESHOLD = 2


class DomainTag(str, Enum):
    FILM = "film"
    REAL_ESTATE = "real_estate"
    BIOTECH = "biotech"
    MEDTECH = "medtech"
    DIGITAL_HEALTH = "digital_health"
    CYBERSECURITY = "cybersecurity"
    DEEPTECH = "deeptech"
    FINTECH = "fintech"
    SAAS = "saas"
    ENTERPRISE_SAAS = "enterprise_saas"
    CPG = "cpg"
    FASHION = "fashion"
    BEAUTY = "beauty"
    FOOD_BEVERAGE = "food_beverage"
    MANUFACTURING = "manufacturing"
    LOGISTICS = "logistics"
    CLEANTECH = "cleantech"
    SUSTAINABLE_MATERIALS = "sustainable_materials"
    EDTECH = "edtech"
    GOVTECH = "govtech"
    WEALTH_MANAGEMENT = "wealth_management"
    GAMING = "gaming"
    GENERAL = "general"


@dataclass(frozen=True)
class DomainDefinition:
    domain: DomainTag
    strong: Tuple[str, ...]
    supporting: Tuple[str, ...]

    @property
    def all_keywords(self) -> Tuple[str, ...]:
        return self.strong + self.supporting


@lru_cache(maxsize=None)
def load_domain_definitions(path: str = KEYWORDS_PATH) -> Tuple[DomainDefinition, ...]:
    """Load keyword families in priority order."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    definitions = []
    for entry in data.get("domains") or []:
        definitions.append(DomainDefinition(
            domain=DomainTag(entry["domain"]),
            strong=tuple(k.lower() for k in entry.get("strong") or []),
            supporting=tuple(k.lower() for k in entry.get("supporting") or []),
        ))

    logger.info(
        "Loaded %d domain keyword families (version %s)",
        len(definitions), data.get("version", "unknown")
    )
    return tuple(definitions)


def _first_match(text: str, min_strong: int, min_supporting: int, min_total: int) -> DomainTag:
    if not text:
        return DomainTag.GENERAL

    for definition in load_domain_definitions():
        strong_hits = count_keyword_hits(text, definition.strong)
        supporting_hits = count_keyword_hits(text, definition.supporting)
        if min_strong and strong_hits >= min_strong:
            return definition.domain
        if min_supporting and supporting_hits >= min_supporting:
            return definition.domain
        if min_total and strong_hits + supporting_hits >= min_total:
            return definition.domain

    return DomainTag.GENERAL


def classify(seeker: Seeker) -> DomainTag:
    text = f"{seeker.industry_text} {seeker.description_text}".strip()
    return _first_match(
        text, min_strong=1, min_supporting=SEEKER_SUPPORTING_THRESHOLD, min_total=0
    )


def classify_provider(provider: ProviderView) -> DomainTag:
    """Two keyword hits from one family. Strong keywords count toward the two
    but never decide on their own."""
    return _first_match(
        provider.text_profile, min_strong=0, min_supporting=0, min_total=PROVIDER_HIT_THRESHOLD
    )
