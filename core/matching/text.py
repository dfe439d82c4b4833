#!/usr/bin/env python3
"""
Text helpers shared by every scorer: tokenization, Jaccard similarity and
keyword containment.

Keyword containment is plain substring matching, except that keywords of
SHORT_KEYWORD_CHARS characters or fewer ("ai", "ev", "us", "soc") must match
a whole word; otherwise they fire inside unrelated words.
"""

import re
from functools import lru_cache
from typing import Iterable, List, Sequence, Set

SHORT_KEYWORD_CHARS = 3
MIN_TOKEN_CHARS = 3

STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of',
    'with', 'by', 'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have',
    'has', 'had', 'do', 'does', 'did', 'will', 'would', 'could', 'should',
    'may', 'might', 'must', 'shall',
])

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def tokenize(text: str) -> List[str]:
    """Unigrams plus bigrams, stop-words removed, deduplicated in order.

    Bigrams are built from the filtered word sequence and joined with "_".
    """
    words = [
        w for w in _NON_ALNUM.sub(" ", (text or "").lower()).split()
        if len(w) >= MIN_TOKEN_CHARS and w not in STOP_WORDS
    ]
    bigrams = [f"{first}_{second}" for first, second in zip(words, words[1:])]

    seen: Set[str] = set()
    unique: List[str] = []
    for token in words + bigrams:
        if token not in seen:
            seen.add(token)
            unique.append(token)
    return unique


def jaccard_similarity(left: Sequence[str], right: Sequence[str]) -> float:
    if not left or not right:
        return 0.0
    left_set, right_set = set(left), set(right)
    return len(left_set & right_set) / len(left_set | right_set)


@lru_cache(maxsize=4096)
def _short_keyword_pattern(keyword: str) -> "re.Pattern[str]":
    return re.compile(r"(?<![a-z0-9])" + re.escape(keyword) + r"(?![a-z0-9])")


def contains_keyword(text: str, keyword: str) -> bool:
    """Case-insensitive containment of keyword in text."""
    if not text or not keyword:
        return False
    keyword = keyword.lower()
    if len(keyword) <= SHORT_KEYWORD_CHARS:
        return _short_keyword_pattern(keyword).search(text.lower()) is not None
    return keyword in text.lower()


def count_keyword_hits(text: str, keywords: Iterable[str]) -> int:
    return sum(1 for k in keywords if contains_keyword(text, k))


def any_keyword(text: str, keywords: Iterable[str]) -> bool:
    return any(contains_keyword(text, k) for k in keywords)
