# -*- coding: utf-8 -*-
"""
Category Classification

Linear scan over an ordered category -> keywords table; the first category
with a keyword contained in the lower-cased utterance wins, otherwise the
fallback label ("Misc").

The table lives in ``uflow/data/categories.yaml`` and is frozen into a tuple
of pairs on first use so declaration order is preserved.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "Misc"

_CATEGORIES_PATH = Path(__file__).resolve().parents[1] / "data" / "categories.yaml"


@lru_cache(maxsize=1)
def _load_config_from_yaml() -> dict:
    """Load the category table from YAML."""
    with open(_CATEGORIES_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def category_table() -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Ordered (category, keywords) pairs."""
    data = _load_config_from_yaml()
    table: list[tuple[str, tuple[str, ...]]] = []
    for item in data.get("categories") or []:
        name = item.get("name")
        keywords = item.get("keywords") or []
        if not name:
            continue
        table.append((name, tuple(str(k).lower() for k in keywords)))
    logger.debug(f"Loaded {len(table)} categories from {_CATEGORIES_PATH.name}")
    return tuple(table)


def allowed_categories() -> tuple[str, ...]:
    """Category vocabulary in declaration order, fallback excluded."""
    return tuple(name for name, _ in category_table())


def classify_category(text: str) -> str:
    """
    Classify an utterance into a category.

    Examples:
        >>> classify_category("pagué el uber")
        'Transport'
        >>> classify_category("xyz totally unknown")
        'Misc'
    """
    lowered = (text or "").lower()
    if not lowered:
        return FALLBACK_CATEGORY

    for name, keywords in category_table():
        if any(keyword in lowered for keyword in keywords):
            return name
    return FALLBACK_CATEGORY
