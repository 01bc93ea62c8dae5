# -*- coding: utf-8 -*-
"""
Amount Extraction

Finds the first numeric token of an utterance and turns it into a
non-negative magnitude. Supported formats:
- plain: gasté 50000 en comida
- scale suffix: 50k, 300mil, 2 millones, 1.5M
- symbol/code prefix: $100, € 20, usd 15
- grouped: 1.500.000 (es), 1,500.75 (en)

Separators depend on the detected language:
- es: a dot followed by exactly three digits groups thousands; the comma is
  the decimal point.
- en: commas group thousands; the dot is the decimal point.

0.0 means "no amount found", never a zero-value transaction.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from uflow.parser.extract_date import DAYS_AGO_PATTERN
from uflow.parser.types import Language

_AMOUNT_PATTERN = re.compile(
    r"(?P<prefix>[$€]|usd|eur|cop)?\s*"
    r"(?P<number>\d+(?:[.,]\d+)*)"
    r"(?:\s*(?P<scale>millones|millón|millon|mil|k|m)(?!\w))?",
    re.IGNORECASE,
)

# Spanish thousands separator: dot followed by exactly three digits
_ES_THOUSANDS_DOT = re.compile(r"\.(?=\d{3}(?!\d))")

_SCALE_MULTIPLIERS = {
    "k": Decimal(1_000),
    "mil": Decimal(1_000),
    "m": Decimal(1_000_000),
    "millón": Decimal(1_000_000),
    "millon": Decimal(1_000_000),
    "millones": Decimal(1_000_000),
}


def _normalize_number(raw: str, lang: Language) -> Decimal:
    """Turn a separator-laden numeric run into a plain Decimal."""
    if lang == Language.ES:
        plain = _ES_THOUSANDS_DOT.sub("", raw).replace(",", ".")
    else:
        plain = raw.replace(",", "")
    return Decimal(plain)


def find_amount(text: str, lang: Language) -> Optional[re.Match]:
    """
    Return the first amount-like match, skipping "hace N días" / "N days ago".

    Args:
        text: utterance
        lang: detected language (only used by callers that also parse)

    Returns:
        The regex match or None
    """
    if not text:
        return None

    excluded = [m.span() for m in DAYS_AGO_PATTERN.finditer(text)]

    for match in _AMOUNT_PATTERN.finditer(text):
        start, end = match.span("number")
        if any(start < ee and end > es for es, ee in excluded):
            continue
        return match
    return None


def extract_amount(text: str, lang: Language) -> float:
    """
    Extract the amount of an utterance.

    Args:
        text: utterance (e.g. "gasté 300mil en comida", "spent 50k on food")
        lang: detected language, decides separator handling

    Returns:
        The magnitude with the scale applied, or 0.0 when nothing parses
    """
    match = find_amount(text, lang)
    if not match:
        return 0.0

    try:
        value = _normalize_number(match.group("number"), lang)
    except InvalidOperation:
        return 0.0

    scale = match.group("scale")
    if scale:
        value *= _SCALE_MULTIPLIERS[scale.lower()]

    return float(value)


def strip_amount(text: str, lang: Language) -> str:
    """Return the utterance without its amount token."""
    match = find_amount(text, lang)
    if not match:
        return (text or "").strip()

    span = match.span()
    remaining = text[:span[0]] + " " + text[span[1]:]
    return re.sub(r"\s+", " ", remaining).strip()
