#!/usr/bin/env python3
"""
Matching Models - Data structures for seekers, providers and match results.

Providers are a tagged union (IndividualInvestor | InvestmentFirm). Scorers
never touch the raw records; they read a ProviderView built once per
candidate, which normalizes both shapes behind the same accessors.
"""

import logging
import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import List, Optional, Tuple, Union, Any, Dict

logger = logging.getLogger(__name__)

LONG_DESCRIPTION_CHARS = 50


@dataclass(frozen=True)
class Seeker:
    """The fundraising entity being matched."""
    id: str
    name: str = ""
    industries: List[str] = field(default_factory=list)
    description: Optional[str] = None
    stage: Optional[str] = None
    target_amount: Optional[float] = None
    location: Optional[str] = None
    website: Optional[str] = None

    @property
    def industry_text(self) -> str:
        return " ".join(_as_str_list(self.industries)).lower()

    @property
    def description_text(self) -> str:
        return _as_str(self.description).lower()

    @property
    def text_profile(self) -> str:
        """Industries, description, stage and location as one lowercase string."""
        parts = _as_str_list(self.industries)
        for value in (self.description, self.stage, self.location):
            text = _as_str(value)
            if text:
                parts.append(text)
        return " ".join(parts).lower()

    @property
    def target(self) -> Optional[float]:
        value = _as_float(self.target_amount)
        return value if value and value > 0 else None


@dataclass(frozen=True)
class IndividualInvestor:
    """An individual capital provider (angel, partner, family-office principal)."""
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    firm_id: Optional[str] = None
    bio: Optional[str] = None
    investor_type: Optional[str] = None
    title: Optional[str] = None
    funding_stage: Optional[str] = None
    typical_investment: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    linkedin_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class InvestmentFirm:
    """An investment firm (VC, PE, family office, fund, lender)."""
    id: str
    name: str = ""
    description: Optional[str] = None
    industry: Optional[str] = None
    sectors: List[str] = field(default_factory=list)
    firm_type: Optional[str] = None
    stages: List[str] = field(default_factory=list)
    check_size_min: Optional[float] = None
    check_size_max: Optional[float] = None
    typical_check_size: Optional[str] = None
    aum: Optional[str] = None
    hq_location: Optional[str] = None
    location: Optional[str] = None
    portfolio_count: Optional[int] = None
    website: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


Provider = Union[IndividualInvestor, InvestmentFirm]


@dataclass(frozen=True)
class ProviderView:
    """Read-only capability view shared by every scorer.

    Built with ProviderView.from_provider(); every accessor is already
    normalized, so scorers never deal with missing or mistyped fields.
    """
    kind: str  # "firm" | "individual"
    provider_id: str
    display_name: str
    text_profile: str
    investor_type: str
    stages: Tuple[str, ...]
    locations: Tuple[str, ...]
    check_size_min: Optional[float]
    check_size_max: Optional[float]
    check_size_text: Optional[str]
    aum: Optional[str]
    portfolio_count: int
    last_updated: Optional[datetime]
    days_since_update: Optional[float]
    has_website: bool = False
    has_long_description: bool = False
    has_sectors: bool = False
    has_linkedin: bool = False
    has_email: bool = False

    @property
    def is_firm(self) -> bool:
        return self.kind == "firm"

    @property
    def primary_location(self) -> str:
        return self.locations[0] if self.locations else ""

    @property
    def firm_id(self) -> Optional[str]:
        return self.provider_id if self.is_firm else None

    @property
    def investor_id(self) -> Optional[str]:
        return None if self.is_firm else self.provider_id

    @classmethod
    def from_provider(cls, provider: Provider, now: Optional[datetime] = None) -> "ProviderView":
        if isinstance(provider, InvestmentFirm):
            return cls._from_firm(provider, now)
        if isinstance(provider, IndividualInvestor):
            return cls._from_individual(provider, now)
        raise TypeError(f"Unsupported provider type: {type(provider).__name__}")

    @classmethod
    def _from_firm(cls, firm: InvestmentFirm, now: Optional[datetime]) -> "ProviderView":
        description = _as_str(firm.description)
        sectors = _as_str_list(firm.sectors)
        firm_type = _as_str(firm.firm_type)

        parts = [description, _as_str(firm.industry)] + sectors + [firm_type]
        locations = [loc.lower() for loc in (_as_str(firm.hq_location), _as_str(firm.location)) if loc]
        last_updated = _as_datetime(firm.updated_at) or _as_datetime(firm.created_at)

        return cls(
            kind="firm",
            provider_id=str(firm.id),
            display_name=_as_str(firm.name),
            text_profile=" ".join(p for p in parts if p).lower(),
            investor_type=firm_type,
            stages=tuple(_as_str_list(firm.stages)),
            locations=tuple(locations),
            check_size_min=_as_positive_float(firm.check_size_min),
            check_size_max=_as_positive_float(firm.check_size_max),
            check_size_text=_as_str(firm.typical_check_size) or None,
            aum=_as_str(firm.aum) or None,
            portfolio_count=_as_int(firm.portfolio_count),
            last_updated=last_updated,
            days_since_update=_days_between(last_updated, now),
            has_website=bool(_as_str(firm.website)),
            has_long_description=len(description) > LONG_DESCRIPTION_CHARS,
            has_sectors=len(sectors) > 0,
        )

    @classmethod
    def _from_individual(cls, investor: IndividualInvestor, now: Optional[datetime]) -> "ProviderView":
        investor_type = _as_str(investor.investor_type)
        parts = [_as_str(investor.bio), investor_type, _as_str(investor.title)]
        name = f"{_as_str(investor.first_name)} {_as_str(investor.last_name)}".strip()
        stage = _as_str(investor.funding_stage)
        location = _as_str(investor.location)
        last_updated = _as_datetime(investor.updated_at) or _as_datetime(investor.created_at)

        return cls(
            kind="individual",
            provider_id=str(investor.id),
            display_name=name,
            text_profile=" ".join(p for p in parts if p).lower(),
            investor_type=investor_type,
            stages=(stage,) if stage else (),
            locations=(location.lower(),) if location else (),
            check_size_min=None,
            check_size_max=None,
            check_size_text=_as_str(investor.typical_investment) or None,
            aum=None,
            portfolio_count=0,
            last_updated=last_updated,
            days_since_update=_days_between(last_updated, now),
            has_linkedin=bool(_as_str(investor.linkedin_url)),
            has_email=bool(_as_str(investor.email)),
        )


@dataclass(frozen=True)
class CriteriaBreakdown:
    """Seven-factor breakdown, every factor in [0, 100]."""
    semantic_fit: float = 0.0
    stage_compatibility: float = 0.0
    economic_fit: float = 0.0
    geographic_practicality: float = 0.0
    investor_behavior: float = 0.0
    investor_type_logic: float = 0.0
    network_warmth: float = 0.0

    @classmethod
    def empty(cls) -> "CriteriaBreakdown":
        return cls()

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ConstraintResult:
    passed: bool
    failures: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DomainScore:
    """Domain-specific score. A multiplier of exactly 0 is an auto-reject."""
    domain: str
    score: float
    multiplier: float
    reasons: Tuple[str, ...] = ()

    @property
    def is_rejection(self) -> bool:
        return self.multiplier == 0


@dataclass(frozen=True)
class MatchResult:
    """Complete scored pairing of one seeker with one provider."""
    investor_id: Optional[str]
    firm_id: Optional[str]
    score: int
    base_score: int
    context_multiplier: float
    activity_multiplier: float
    reasons: Tuple[str, ...]
    breakdown: CriteriaBreakdown
    passed_hard_constraints: bool
    constraint_failures: Tuple[str, ...] = ()
    domain: str = "general"
    criteria_score: int = 0

    @property
    def provider_id(self) -> Optional[str]:
        return self.firm_id or self.investor_id


@dataclass(frozen=True)
class BaselineComparison:
    """Output of compare_against_baseline()."""
    results: List[MatchResult]
    stats: Dict[str, float]


# ----------------------------
# Normalization helpers
# ----------------------------
def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        # Comma separated text instead of a list
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_as_str(v) for v in value if _as_str(v)]
    return []


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = re.sub(r"[^0-9.\-]", "", value)
        try:
            return float(cleaned)
        except ValueError:
            return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_positive_float(value: Any) -> Optional[float]:
    number = _as_float(value)
    return number if number is not None and number > 0 else None


def _as_int(value: Any) -> int:
    number = _as_float(value)
    return int(number) if number is not None and number > 0 else 0


def _as_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Ignoring unparsable timestamp %r", value)
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


def _days_between(then: Optional[datetime], now: Optional[datetime]) -> Optional[float]:
    if then is None:
        return None
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - then).total_seconds() / 86400.0
