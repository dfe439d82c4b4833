#!/usr/bin/env python3
"""
Funding-stage normalization and stage distance.

Free-text stages ("Series A", "Early Stage", "Pre-IPO") are mapped onto an
ordered hierarchy through an alias table. Aliases are checked in hierarchy
order, so "pre-seed" wins over "seed" for "Pre-Seed round".
"""

from types import MappingProxyType
from typing import Iterable, Optional, Tuple

from core.matching.text import contains_keyword

STAGE_HIERARCHY: Tuple[str, ...] = (
    "pre-seed", "seed", "series-a", "series-b", "series-c", "growth", "late-stage",
)

STAGE_ALIASES = MappingProxyType({
    "pre-seed": ("pre-seed", "pre seed", "preseed", "angel", "idea"),
    "seed": ("seed", "seed-stage", "early-stage", "early stage"),
    "series-a": ("series a", "series-a", "a round", "a"),
    "series-b": ("series b", "series-b", "b round", "b"),
    "series-c": ("series c", "series-c", "c round", "series c+", "c"),
    "growth": ("growth", "expansion"),
    "late-stage": ("late stage", "late-stage", "pre-ipo", "mezzanine"),
})


def normalize_stage(stage: Optional[str]) -> str:
    """Map a free-text stage to its canonical name.

    Returns the lowercased input unchanged when no alias matches, and "" for
    empty input.
    """
    if not stage:
        return ""
    lower = str(stage).lower().strip()
    for canonical, aliases in STAGE_ALIASES.items():
        if any(_matches_alias(lower, alias) for alias in aliases):
            return canonical
    return lower


def _matches_alias(stage: str, alias: str) -> bool:
    # Single-letter aliases ("a", "b", "c") only name a round on their own
    if len(alias) == 1:
        return stage == alias
    return contains_keyword(stage, alias)


def stage_index(stage: Optional[str]) -> int:
    normalized = normalize_stage(stage)
    return STAGE_HIERARCHY.index(normalized) if normalized in STAGE_HIERARCHY else -1


def stage_distance(seeker_stage: Optional[str], provider_stages: Iterable[str]) -> int:
    """Minimum hierarchy distance between the seeker and any provider stage.

    Unmapped stages on either side contribute distance 0.
    """
    seeker_index = stage_index(seeker_stage)
    if seeker_index == -1:
        return 0

    distances = [
        abs(seeker_index - index)
        for index in (stage_index(s) for s in provider_stages)
        if index != -1
    ]
    return min(distances) if distances else 0


def is_early_stage(stage: Optional[str]) -> bool:
    return normalize_stage(stage) in ("pre-seed", "seed")
