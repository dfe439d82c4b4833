#!/usr/bin/env python3
"""
Constraint Gate - Hard pass/fail checks applied before any scoring.

Checks are independent and every failure is accumulated, so callers can
report all reasons a provider was rejected:
- Check-size overlap below the configured minimum
- Stage distance above the configured maximum
- Firm inactive for longer than the configured number of months
- Geographic exclusion (no exclusions are enforced at the gate)
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from core.config_loader import ConstraintConfig
from core.matching.check_size import check_size_overlap
from core.matching.models import ConstraintResult, ProviderView, Seeker
from core.matching.stages import stage_distance

logger = logging.getLogger(__name__)


def check_constraints(
    seeker: Seeker,
    provider: ProviderView,
    include_inactive: bool,
    config: ConstraintConfig,
    now: Optional[datetime] = None
) -> ConstraintResult:
    """
    Run every hard constraint against one pairing.

    Args:
        seeker: Seeker being matched
        provider: Normalized view of the candidate provider
        include_inactive: Skip the inactivity check when True
        config: Constraint thresholds
        now: Reference time for the inactivity check (defaults to UTC now)

    Returns:
        ConstraintResult with every failure reason, empty when passed
    """
    failures: List[str] = []

    overlap = check_size_overlap(seeker, provider, config)
    if overlap < config.min_check_size_overlap:
        failures.append(
            f"Check size mismatch: less than {config.min_check_size_overlap:.0%} overlap"
        )

    distance = stage_distance(seeker.stage, provider.stages)
    if distance > config.max_stage_distance:
        failures.append(f"Stage mismatch: {distance} levels apart")

    if not include_inactive and _is_inactive(provider, config, now):
        failures.append(f"Investor inactive for {config.inactivity_months}+ months")

    exclusion = check_geographic_exclusion(seeker, provider)
    if exclusion:
        failures.append(f"Geographic exclusion: {exclusion}")

    if failures:
        logger.debug(
            "Provider %s rejected at gate for seeker %s: %s",
            provider.provider_id, seeker.id, "; ".join(failures)
        )
    return ConstraintResult(passed=not failures, failures=tuple(failures))


def _is_inactive(provider: ProviderView, config: ConstraintConfig, now: Optional[datetime]) -> bool:
    # Only firms carry a trustworthy activity timestamp
    if not provider.is_firm or provider.last_updated is None:
        return False
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - relativedelta(months=config.inactivity_months)
    return provider.last_updated < cutoff


def check_geographic_exclusion(seeker: Seeker, provider: ProviderView) -> Optional[str]:
    """Hook for hard geographic exclusions. Geography is scored softly instead."""
    return None
