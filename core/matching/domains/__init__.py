#!/usr/bin/env python3
"""
Domain-Specific Scorers.

Public API:
- DomainScorerRegistry: strategy map from DomainTag to scorer
- DomainScorer: base class for all scorers

Bespoke scorers:
- film.py: capital intent, risk profile, deal-structure matrix, genre
- real_estate.py: property type, deal stage, geography, 50% check-size floor
- biotech.py, medtech.py, deeptech.py, saas.py, cpg.py: taxonomies over
  the weighted-category scorer in weighted.py

Every other tag, including general, uses generic.py.
"""

from typing import Dict

from core.config_loader import MatchingConfig
from core.matching.classifier import DomainTag
from core.matching.domains.base import DomainScorer
from core.matching.domains.biotech import BiotechDomainScorer
from core.matching.domains.cpg import CpgDomainScorer
from core.matching.domains.deeptech import DeeptechDomainScorer
from core.matching.domains.film import FilmDomainScorer
from core.matching.domains.generic import GenericDomainScorer
from core.matching.domains.medtech import MedtechDomainScorer
from core.matching.domains.real_estate import RealEstateDomainScorer
from core.matching.domains.saas import SaasDomainScorer

BESPOKE_SCORERS = {
    DomainTag.FILM: FilmDomainScorer,
    DomainTag.REAL_ESTATE: RealEstateDomainScorer,
    DomainTag.BIOTECH: BiotechDomainScorer,
    DomainTag.MEDTECH: MedtechDomainScorer,
    DomainTag.DEEPTECH: DeeptechDomainScorer,
    DomainTag.SAAS: SaasDomainScorer,
    DomainTag.CPG: CpgDomainScorer,
}


class DomainScorerRegistry:
    """Builds one scorer per DomainTag; unlisted tags fall back to the generic scorer."""

    def __init__(self, config: MatchingConfig):
        self._scorers: Dict[DomainTag, DomainScorer] = {
            tag: BESPOKE_SCORERS.get(tag, GenericDomainScorer)(config, tag)
            for tag in DomainTag
        }

    def scorer_for(self, domain: DomainTag) -> DomainScorer:
        return self._scorers.get(domain, self._scorers[DomainTag.GENERAL])


__all__ = ['DomainScorerRegistry', 'DomainScorer', 'BESPOKE_SCORERS']
