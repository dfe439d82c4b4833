#!/usr/bin/env python3
"""
Domain scorer base class and shared keyword helpers.

Every domain scorer is called as scorer(seeker, provider, breakdown) and
returns a DomainScore. The sector-mismatch penalty is applied here, before
the domain-specific logic runs: when the provider clearly belongs to a
different (non-general) domain, the pairing gets a low score and a reduced
multiplier instead of an outright rejection.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from core.config_loader import MatchingConfig
from core.matching.classifier import DomainTag, classify_provider
from core.matching.models import CriteriaBreakdown, DomainScore, ProviderView, Seeker
from core.matching.text import any_keyword

logger = logging.getLogger(__name__)

KeywordTable = Mapping[str, Tuple[str, ...]]


class DomainScorer(ABC):
    """Strategy for one domain tag."""

    domain: DomainTag = DomainTag.GENERAL
    mismatch_score: float = 30.0
    mismatch_multiplier: float = 0.6

    def __init__(self, config: MatchingConfig, domain: Optional[DomainTag] = None):
        self.config = config
        if domain is not None:
            self.domain = domain

    def __call__(self, seeker: Seeker, provider: ProviderView, breakdown: CriteriaBreakdown) -> DomainScore:
        provider_domain = classify_provider(provider)
        if self.is_sector_mismatch(provider_domain):
            logger.debug(
                "Provider %s is %s, seeker %s is %s: sector mismatch penalty",
                provider.provider_id, provider_domain.value, seeker.id, self.domain.value
            )
            return DomainScore(
                domain=self.domain.value,
                score=self.mismatch_score,
                multiplier=self.mismatch_multiplier,
                reasons=(f"Investor focused on {label(provider_domain)}, not {label(self.domain)}",),
            )

        result = self.score(seeker, provider, breakdown)
        if result.is_rejection:
            logger.debug(
                "Domain %s auto-rejected provider %s for seeker %s: %s",
                self.domain.value, provider.provider_id, seeker.id, "; ".join(result.reasons)
            )
        return result

    def is_sector_mismatch(self, provider_domain: DomainTag) -> bool:
        return (
            self.domain != DomainTag.GENERAL
            and provider_domain != DomainTag.GENERAL
            and provider_domain != self.domain
        )

    def reject(self, reason: str) -> DomainScore:
        return DomainScore(domain=self.domain.value, score=0.0, multiplier=0.0, reasons=(reason,))

    @abstractmethod
    def score(self, seeker: Seeker, provider: ProviderView, breakdown: CriteriaBreakdown) -> DomainScore:
        """Domain-specific scoring for a provider that is not a sector mismatch."""
        pass


def label(domain: DomainTag) -> str:
    return domain.value.replace("_", " ")


def detect_first(text: str, table: KeywordTable, default: str = "general") -> str:
    """First category in table order with any keyword present in text."""
    for category, keywords in table.items():
        if any_keyword(text, keywords):
            return category
    return default


def detect_all(text: str, table: KeywordTable) -> Set[str]:
    return {category for category, keywords in table.items() if any_keyword(text, keywords)}


def is_adjacent(first: str, second: str, pairs: Iterable[Tuple[str, str]]) -> bool:
    return any((first, second) in (pair, pair[::-1]) for pair in pairs)


def ladder_positions(text: str, ladder: Sequence[Tuple[str, Tuple[str, ...]]]) -> List[int]:
    """Indices of every ladder rung mentioned in text, in ladder order."""
    return [i for i, (_, keywords) in enumerate(ladder) if any_keyword(text, keywords)]
