#!/usr/bin/env python3
"""
Check-size parsing and overlap calculation.

Providers publish check sizes either as numeric bounds or as free text
("$500K-$2M", "€1M", "1-5m", "up to $2M"). Text is parsed into a numeric
range; text that cannot be parsed is treated as absent.

Overlap ratio between the seeker's acceptable raise window
(target x 0.5 .. target x 1.5 by default) and the provider's range:

    overlap = (min(ends) - max(starts)) / max(provider_width, seeker_width)

clamped to [0, 1]. No target or no provider data gives 0.
"""

import logging
import re
from typing import Optional, Tuple

from core.config_loader import ConstraintConfig
from core.matching.models import Seeker, ProviderView

logger = logging.getLogger(__name__)

SINGLE_VALUE_SPREAD = 0.5

_SUFFIX_MULTIPLIERS = {
    'k': 1e3, 'thousand': 1e3,
    'm': 1e6, 'mm': 1e6, 'million': 1e6,
    'b': 1e9, 'bn': 1e9, 'billion': 1e9,
}

_AMOUNT = r"[$€£]?\s*(\d+(?:\.\d+)?)(?:\s*(thousand|million|billion|mm|bn|k|m|b)\b)?"
_RANGE_PATTERN = re.compile(_AMOUNT + r"\s*(?:-|to)\s*" + _AMOUNT)
_SINGLE_PATTERN = re.compile(_AMOUNT)

CheckRange = Tuple[float, float]


def _scale(number: str, suffix: Optional[str]) -> float:
    return float(number) * _SUFFIX_MULTIPLIERS.get(suffix or '', 1.0)


def parse_check_size_range(text: Optional[str]) -> Optional[CheckRange]:
    """Parse free-text check size into (min, max).

    Each bound keeps its own suffix ("$500K-$2M" is 500,000..2,000,000). A
    bound without a suffix borrows the other bound's; when borrowing would
    put the lower bound above the upper one ("500-2M"), the lower bound is
    read in thousands instead. Single values are expanded to +/-50%.

    Returns None for unparsable or non-positive input.
    """
    if not text or not isinstance(text, str):
        return None

    normalized = text.lower().replace(',', '').replace('–', '-').replace('—', '-')

    range_match = _RANGE_PATTERN.search(normalized)
    if range_match:
        low_num, low_suffix, high_num, high_suffix = range_match.groups()
        high = _scale(high_num, high_suffix or low_suffix)
        low = _scale(low_num, low_suffix or high_suffix)
        if low > high and not low_suffix:
            low = _scale(low_num, 'k')
            if low > high:
                low = _scale(low_num, None)
        return _validated(low, high, text)

    single_match = _SINGLE_PATTERN.search(normalized)
    if single_match:
        value = _scale(*single_match.groups())
        return _validated(value * (1 - SINGLE_VALUE_SPREAD), value * (1 + SINGLE_VALUE_SPREAD), text)

    logger.debug("Unparsable check size %r", text)
    return None


def parse_amount(text: Optional[str]) -> Optional[float]:
    """Parse a single amount such as "$1.5B" or "250M AUM"."""
    if not text or not isinstance(text, str):
        return None
    match = _SINGLE_PATTERN.search(text.lower().replace(',', ''))
    if not match:
        return None
    value = _scale(*match.groups())
    return value if value > 0 else None


def _validated(low: float, high: float, text: str) -> Optional[CheckRange]:
    if low > high:
        low, high = high, low
    if high <= 0:
        logger.debug("Discarding non-positive check size %r", text)
        return None
    return max(0.0, low), high


def seeker_window(seeker: Seeker, config: ConstraintConfig) -> Optional[CheckRange]:
    target = seeker.target
    if target is None:
        return None
    return target * config.target_range_low, target * config.target_range_high


def provider_check_range(provider: ProviderView, window: Optional[CheckRange] = None) -> Optional[CheckRange]:
    """Provider's check range. Stated numeric bounds win over parsed text.

    A missing upper bound is treated as open-ended up to the seeker window.
    """
    low, high = provider.check_size_min, provider.check_size_max
    if low is not None or high is not None:
        if high is None:
            ceiling = window[1] if window else low
            high = max(low, ceiling)
        return (low or 0.0), high
    return parse_check_size_range(provider.check_size_text)


def check_size_overlap(seeker: Seeker, provider: ProviderView, config: ConstraintConfig) -> float:
    window = seeker_window(seeker, config)
    if window is None:
        return 0.0

    check_range = provider_check_range(provider, window)
    if check_range is None:
        return 0.0

    check_min, check_max = check_range
    target_min, target_max = window

    overlap_start = max(check_min, target_min)
    overlap_end = min(check_max, target_max)
    if overlap_start >= overlap_end:
        return 0.0

    total_range = max(check_max - check_min, target_max - target_min)
    if total_range <= 0:
        return 0.0
    return min(1.0, (overlap_end - overlap_start) / total_range)
