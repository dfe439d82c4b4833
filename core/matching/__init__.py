#!/usr/bin/env python3
"""
Matching Module - Rule-based capital matching.

Public API:
- MatchingService: run_matching / score_candidate / compare_against_baseline
- Seeker, IndividualInvestor, InvestmentFirm, Provider: input records
- MatchResult, CriteriaBreakdown, BaselineComparison: output records
- CapitalSource: lookup interface implemented by persistence layers
- DomainTag, classify, classify_provider: domain classification
- MatchingError, SeekerNotFoundError

Modules:
- models.py: records and the ProviderView accessor layer
- check_size.py, stages.py, text.py, constants.py: shared helpers and tables
- constraints.py: Constraint Gate
- criteria.py: seven-factor Criteria Scorer
- classifier.py: Domain Classifier (keywords in data/domain_keywords.yaml)
- domains/: domain-specific scorers
- multipliers.py: blending, context and activity multipliers
- service.py: MatchingService orchestrator
"""

from core.matching.classifier import DomainTag, classify, classify_provider
from core.matching.exceptions import MatchingError, SeekerNotFoundError
from core.matching.interfaces import CapitalSource
from core.matching.models import (
    BaselineComparison, CriteriaBreakdown, IndividualInvestor, InvestmentFirm,
    MatchResult, Provider, Seeker,
)
from core.matching.service import MatchingService

__all__ = [
    'MatchingService',
    'CapitalSource',
    'Seeker',
    'IndividualInvestor',
    'InvestmentFirm',
    'Provider',
    'MatchResult',
    'CriteriaBreakdown',
    'BaselineComparison',
    'DomainTag',
    'classify',
    'classify_provider',
    'MatchingError',
    'SeekerNotFoundError',
]
