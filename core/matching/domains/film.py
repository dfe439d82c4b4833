#!/usr/bin/env python3
"""
Film Domain Scorer - Capital intent, risk, deal structure and genre.

Starts from 50 points and a 1.0 multiplier:
- Capital intent: exact (+20, x1.25), adjacent (+10, x0.85), mismatch (x0.40)
- Risk profile: aligned (+15, x1.15), misaligned (-10, x0.70)
- Deal structure matrix: 1.0 (+15, x1.20), >=0.6 (x0.80), >0 (-10, x0.60),
  0 -> auto-reject
- Genre efficiency and recent film activity adjust the multiplier

Final domain score: min(100, round(points x multiplier)).
"""

from types import MappingProxyType
from typing import List, Optional, Tuple

from core.matching.classifier import DomainTag
from core.matching.domains.base import DomainScorer, detect_first, is_adjacent
from core.matching.models import CriteriaBreakdown, DomainScore, ProviderView, Seeker
from core.matching.text import any_keyword

# Checked in order, first match wins
CAPITAL_INTENTS = MappingProxyType({
    "single-picture": ("single-picture", "single picture", "single film", "one picture",
                       "feature film", "single project"),
    "slate-financing": ("slate", "multiple films", "film slate", "portfolio of films"),
    "gap-financing": ("gap financing", "gap", "bridge", "completion financing"),
    "ip-acquisition": ("ip", "intellectual property", "library", "rights acquisition"),
    "production-equity": ("production company", "production", "producer", "equity"),
    "studio-equity": ("major studio", "mini-major", "studio"),
    "film-infrastructure": ("infrastructure", "studio facility", "post-production"),
    "film-tech": ("vfx", "streaming tech", "distribution tech", "technology", "tech"),
})

ADJACENT_INTENTS = (
    ("single-picture", "slate-financing"),
    ("gap-financing", "production-equity"),
    ("ip-acquisition", "production-equity"),
    ("studio-equity", "production-equity"),
)

PRESERVATION_TERMS = ("preservation", "yield", "stable", "low risk", "secured")
AGGRESSIVE_TERMS = ("asymmetric", "high risk", "upside", "speculative", "high return")
HIGH_RISK_PROJECT_TERMS = ("development", "first-time", "debut", "indie")
LOW_RISK_PROJECT_TERMS = ("presales", "guaranteed", "tax credit", "completion bond")

# Offered structure -> provider preference -> compatibility
STRUCTURE_MATRIX = MappingProxyType({
    "senior-debt": MappingProxyType({"debt": 1.0, "revenue": 0.0, "equity": 0.0, "preferred": 0.0}),
    "revenue-participation": MappingProxyType({"debt": 0.6, "revenue": 1.0, "equity": 0.7, "preferred": 0.7}),
    "preferred-equity": MappingProxyType({"debt": 0.0, "revenue": 0.7, "equity": 0.7, "preferred": 1.0}),
    "common-equity": MappingProxyType({"debt": 0.0, "revenue": 0.0, "equity": 1.0, "preferred": 0.7}),
})
UNDETECTED_STRUCTURE_SCORE = 0.7

OFFERED_STRUCTURES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("senior-debt", ("senior debt", "senior loan")),
    ("revenue-participation", ("revenue", "participation", "royalty")),
    ("preferred-equity", ("preferred equity", "preferred")),
    ("common-equity", ("equity", "ownership", "common")),
    ("senior-debt", ("debt", "loan")),
)

PREFERRED_STRUCTURES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("debt", ("debt", "loan", "lending", "lender")),
    ("revenue", ("revenue", "participation", "royalty")),
    ("preferred", ("preferred",)),
    ("equity", ("equity", "ownership")),
)

RECENT_ACTIVITY_TERMS = ("recent", "active", "portfolio")


class FilmDomainScorer(DomainScorer):
    domain = DomainTag.FILM

    def score(self, seeker: Seeker, provider: ProviderView, breakdown: CriteriaBreakdown) -> DomainScore:
        seeker_text = seeker.description_text
        provider_text = provider.text_profile
        reasons: List[str] = []
        points = 50.0
        multiplier = 1.0

        structure = structure_compatibility(seeker_text, provider_text)
        if structure == 0:
            return self.reject("Incompatible deal structure - auto-reject")

        intent = match_capital_intent(seeker_text, provider_text)
        if intent == "exact":
            multiplier *= 1.25
            points += 20
            reasons.append("Exact capital intent match")
        elif intent == "adjacent":
            multiplier *= 0.85
            points += 10
            reasons.append("Adjacent capital intent")
        else:
            multiplier *= 0.40
            reasons.append("Capital intent mismatch")

        risk = match_risk_profile(seeker_text, provider_text)
        if risk == "aligned":
            multiplier *= 1.15
            points += 15
            reasons.append("Risk profile aligned")
        elif risk == "misaligned":
            multiplier *= 0.70
            points -= 10
            reasons.append("Risk profile mismatch")

        if structure >= 0.9:
            multiplier *= 1.20
            points += 15
            reasons.append("Fully compatible deal structure")
        elif structure >= 0.6:
            multiplier *= 0.80
            reasons.append("Partial structure compatibility")
        else:
            multiplier *= 0.60
            points -= 10
            reasons.append("Structure compatibility concerns")

        genre_multiplier, genre_reason = genre_efficiency(seeker_text)
        multiplier *= genre_multiplier
        if genre_reason:
            reasons.append(genre_reason)

        if any_keyword(provider_text, RECENT_ACTIVITY_TERMS):
            multiplier *= 1.10
            reasons.append("Active in film deals recently")
        else:
            multiplier *= 0.75
            reasons.append("No recent film deal activity")

        score = max(0, min(100, round(points * multiplier)))
        return DomainScore(domain=self.domain.value, score=float(score), multiplier=multiplier,
                           reasons=tuple(reasons))


def match_capital_intent(seeker_text: str, provider_text: str) -> str:
    """Returns "exact", "adjacent" or "mismatch"."""
    # Each side takes the first intent in table order that it mentions, so
    # "single-picture equity" stays single-picture rather than production equity
    seeker_intent = detect_first(seeker_text, CAPITAL_INTENTS)
    provider_intent = detect_first(provider_text, CAPITAL_INTENTS)

    if seeker_intent == provider_intent and seeker_intent != "general":
        return "exact"
    if is_adjacent(seeker_intent, provider_intent, ADJACENT_INTENTS):
        return "adjacent"
    # A provider with no stated intent is treated as open to the project
    return "adjacent" if provider_intent == "general" else "mismatch"


def match_risk_profile(seeker_text: str, provider_text: str) -> str:
    """Returns "aligned", "neutral" or "misaligned"."""
    provider_preservation = any_keyword(provider_text, PRESERVATION_TERMS)
    provider_aggressive = any_keyword(provider_text, AGGRESSIVE_TERMS)
    project_high_risk = any_keyword(seeker_text, HIGH_RISK_PROJECT_TERMS)
    project_low_risk = any_keyword(seeker_text, LOW_RISK_PROJECT_TERMS)

    if provider_preservation and project_high_risk:
        return "misaligned"
    if provider_aggressive and project_low_risk:
        return "neutral"
    if (provider_preservation and project_low_risk) or (provider_aggressive and project_high_risk):
        return "aligned"
    return "neutral"


def _detect_structure(text: str, table: Tuple[Tuple[str, Tuple[str, ...]], ...]) -> Optional[str]:
    for structure, keywords in table:
        if any_keyword(text, keywords):
            return structure
    return None


def structure_compatibility(seeker_text: str, provider_text: str) -> float:
    """Look up offered structure x preferred structure; 0 means incompatible."""
    offered = _detect_structure(seeker_text, OFFERED_STRUCTURES)
    preferred = _detect_structure(provider_text, PREFERRED_STRUCTURES)
    if offered is None or preferred is None:
        return UNDETECTED_STRUCTURE_SCORE
    return STRUCTURE_MATRIX[offered][preferred]


def genre_efficiency(seeker_text: str) -> Tuple[float, Optional[str]]:
    if any_keyword(seeker_text, ("horror", "thriller")):
        return 1.10, "Horror/thriller (efficient genre)"
    if any_keyword(seeker_text, ("prestige", "drama", "arthouse")):
        if not any_keyword(seeker_text, ("presale", "distribution")):
            return 0.90, "Prestige drama without presales (higher risk)"
    if "documentary" in seeker_text and any_keyword(seeker_text, ("grant", "foundation")):
        return 1.05, "Documentary with grants attached"
    return 1.0, None
