#!/usr/bin/env python3
"""Errors raised by the matching engine."""


class MatchingError(Exception):
    """Base class for matching failures surfaced to callers."""


class SeekerNotFoundError(MatchingError):
    """The requested seeker id does not resolve."""

    def __init__(self, seeker_id: str):
        super().__init__(f"Seeker not found: {seeker_id}")
        self.seeker_id = seeker_id
