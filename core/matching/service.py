#!/usr/bin/env python3
"""
Matching Service - Rank capital providers for one seeker.

Pipeline per candidate:
1. Constraint Gate (hard reject, never scored)
2. Criteria Scorer: seven-factor breakdown and base score
3. Domain scorer for the seeker's domain (may auto-reject)
4. Blend base and domain scores, apply context and activity multipliers

The ranker keeps gate-passing candidates meeting min_score, sorts them by
score (stable, so ties keep pool order) and truncates to limit.

Candidates are independent, so scoring can run on a thread pool when
ranking.max_workers > 1; results are collected in pool order either way.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from core.config_loader import MatchingConfig
from core.matching.classifier import DomainTag, classify
from core.matching.constraints import check_constraints
from core.matching.criteria import generate_reasons, score_criteria
from core.matching.domains import DomainScorerRegistry
from core.matching.exceptions import SeekerNotFoundError
from core.matching.interfaces import CapitalSource
from core.matching.models import (
    BaselineComparison, CriteriaBreakdown, IndividualInvestor, InvestmentFirm,
    MatchResult, Provider, ProviderView, Seeker,
)
from core.matching.multipliers import (
    activity_multiplier, blend_scores, context_multiplier, final_score,
)

logger = logging.getLogger(__name__)


def candidate_pool(providers: Sequence[Provider]) -> List[Provider]:
    """Firms first, then individuals not attached to a firm."""
    firms = [p for p in providers if isinstance(p, InvestmentFirm)]
    individuals = [p for p in providers if isinstance(p, IndividualInvestor) and not p.firm_id]
    return firms + individuals


class MatchingService:
    """
    Service for ranking capital providers against a seeker.

    Reads seekers and providers through a CapitalSource and never writes;
    a single instance can serve concurrent runs.
    """

    def __init__(
        self,
        source: CapitalSource,
        config: Optional[MatchingConfig] = None
    ):
        self.source = source
        self.config = config or MatchingConfig()
        self.domain_scorers = DomainScorerRegistry(self.config)

    def run_matching(
        self,
        seeker_id: str,
        limit: Optional[int] = None,
        include_inactive_providers: Optional[bool] = None,
        min_score: Optional[float] = None,
        now: Optional[datetime] = None
    ) -> List[MatchResult]:
        """Score the whole provider pool for one seeker and return the ranked matches.

        Args:
            seeker_id: Seeker to match
            limit: Maximum number of results (default ranking.limit)
            include_inactive_providers: Skip the inactivity gate (default ranking setting)
            min_score: Minimum final score to keep (default ranking.min_score)
            now: Reference time for activity checks (default UTC now)

        Returns:
            MatchResults sorted by score descending, at most limit long

        Raises:
            SeekerNotFoundError: seeker_id does not resolve
        """
        ranking = self.config.ranking
        limit = ranking.limit if limit is None else limit
        min_score = ranking.min_score if min_score is None else min_score
        if include_inactive_providers is None:
            include_inactive_providers = ranking.include_inactive_providers

        seeker = self.source.get_seeker_by_id(seeker_id)
        if seeker is None:
            raise SeekerNotFoundError(seeker_id)

        now = now or datetime.now(timezone.utc)
        candidates = candidate_pool(self.source.list_providers())
        domain = classify(seeker)
        logger.info(
            "Matching seeker %s (domain=%s) against %d candidates",
            seeker.id, domain.value, len(candidates)
        )

        scored = self._score_all(seeker, candidates, include_inactive_providers, now, domain)
        kept = [
            r for r in scored
            if r is not None and r.passed_hard_constraints and r.score >= min_score
        ]
        kept.sort(key=lambda r: r.score, reverse=True)

        rejected = sum(1 for r in scored if r is not None and not r.passed_hard_constraints)
        logger.info(
            "Seeker %s: %d matches kept, %d rejected, returning %d",
            seeker.id, len(kept), rejected, min(limit, len(kept))
        )
        return kept[:limit]

    def _score_all(
        self,
        seeker: Seeker,
        candidates: List[Provider],
        include_inactive: bool,
        now: datetime,
        domain: DomainTag
    ) -> List[Optional[MatchResult]]:
        def score_one(provider: Provider) -> Optional[MatchResult]:
            return self._safe_score(seeker, provider, include_inactive, now, domain)

        max_workers = self.config.ranking.max_workers
        if not max_workers or max_workers <= 1 or len(candidates) <= 1:
            return [score_one(p) for p in candidates]

        # map() yields in submission order, so output order never depends on timing
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(score_one, candidates))

    def _safe_score(
        self,
        seeker: Seeker,
        provider: Provider,
        include_inactive: bool,
        now: datetime,
        domain: DomainTag
    ) -> Optional[MatchResult]:
        try:
            return self.score_candidate(seeker, provider, include_inactive, now, domain)
        except Exception as e:
            logger.warning(
                f"Dropping provider {getattr(provider, 'id', '?')} for seeker {seeker.id}: {e}",
                exc_info=True
            )
            return None

    def score_candidate(
        self,
        seeker: Seeker,
        provider: Provider,
        include_inactive: bool = False,
        now: Optional[datetime] = None,
        domain: Optional[DomainTag] = None
    ) -> MatchResult:
        """Score one seeker/provider pairing through the full pipeline."""
        view = ProviderView.from_provider(provider, now)

        gate = check_constraints(seeker, view, include_inactive, self.config.constraints, now)
        if not gate.passed:
            return _rejected(view, gate.failures, CriteriaBreakdown.empty(), domain)

        breakdown, base_score = score_criteria(seeker, view, self.config)
        domain = domain or classify(seeker)

        domain_result = self.domain_scorers.scorer_for(domain)(seeker, view, breakdown)
        if domain_result.is_rejection:
            return _rejected(view, domain_result.reasons, breakdown, domain, base_score)

        adjusted = blend_scores(base_score, domain_result.score, self.config.blend)
        context = context_multiplier(seeker, view, breakdown, self.config.multipliers)
        activity = activity_multiplier(view, self.config.multipliers)

        return MatchResult(
            investor_id=view.investor_id,
            firm_id=view.firm_id,
            score=final_score(adjusted, context, activity),
            base_score=adjusted,
            context_multiplier=context,
            activity_multiplier=activity,
            reasons=domain_result.reasons + tuple(generate_reasons(breakdown, view)),
            breakdown=breakdown,
            passed_hard_constraints=True,
            constraint_failures=(),
            domain=domain.value,
            criteria_score=base_score,
        )

    def compare_against_baseline(self, seeker_id: str) -> BaselineComparison:
        """Re-run matching with the baseline limit; no baseline model exists, so stats are placeholders."""
        results = self.run_matching(seeker_id, limit=self.config.ranking.baseline_limit)
        return BaselineComparison(
            results=results,
            stats={
                'avg_score_diff': 0,
                'rank_changes': 0,
                'new_matches': len(results),
                'dropped_matches': 0,
            },
        )


def _rejected(
    view: ProviderView,
    failures: Tuple[str, ...],
    breakdown: CriteriaBreakdown,
    domain: Optional[DomainTag],
    criteria_score: int = 0
) -> MatchResult:
    return MatchResult(
        investor_id=view.investor_id,
        firm_id=view.firm_id,
        score=0,
        base_score=0,
        context_multiplier=1.0,
        activity_multiplier=1.0,
        reasons=(),
        breakdown=breakdown,
        passed_hard_constraints=False,
        constraint_failures=tuple(failures),
        domain=(domain or DomainTag.GENERAL).value,
        criteria_score=criteria_score,
    )
