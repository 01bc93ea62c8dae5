# -*- coding: utf-8 -*-
"""
Date Resolution

Resolves a small set of relative-date tokens (language-agnostic substring
checks) against the reference time:
- two days back: antier, anteayer, before yesterday
- one day back: yesterday, ayer, anoche
- one day ahead: tomorrow, mañana
- N days back: "hace N días", "N days ago"

Only the first matching rule is applied. Two-day tokens are checked before
one-day tokens since they contain them ("anteayer" ⊃ "ayer").
Absolute dates and weekday names ("el domingo") are not recognized; the
reference time is returned unchanged.
"""

import re
from datetime import datetime, timedelta

DAYS_AGO_PATTERN = re.compile(
    r"hace\s+(?P<es>\d+)\s+d[ií]as?|(?P<en>\d+)\s+days?\s+ago",
    re.IGNORECASE,
)

# (day offset, tokens) in evaluation order
_RELATIVE_TOKENS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (-2, ("antier", "anteayer", "before yesterday")),
    (-1, ("yesterday", "ayer", "anoche")),
    (1, ("tomorrow", "mañana")),
)


def resolve_date(text: str, now: datetime) -> datetime:
    """
    Resolve the transaction date of an utterance.

    Args:
        text: utterance
        now: reference time (interpretation time)

    Returns:
        The adjusted datetime, or ``now`` when no token matches
    """
    if not text:
        return now

    lowered = text.lower()

    for offset, tokens in _RELATIVE_TOKENS:
        if any(token in lowered for token in tokens):
            return now + timedelta(days=offset)

    match = DAYS_AGO_PATTERN.search(lowered)
    if match:
        days = int(match.group("es") or match.group("en"))
        return now - timedelta(days=days)

    return now
