# -*- coding: utf-8 -*-
"""
Rule-based extractors.

Each module resolves one aspect of an utterance; the local interpreter
sequences them:
- detect_language(text, default) -> Language
- extract_amount(text, lang) -> float (0.0 = no amount)
- resolve_currency(text, default, lang) -> Currency
- classify_category(text) -> str
- resolve_date(text, now) -> datetime
- classify_intent(text, lang, has_number) -> IntentDecision

Usage:
    from uflow.parser import extract_amount, Language
    extract_amount("gasté 300mil en comida", Language.ES)  # 300000.0
"""

from uflow.parser.types import Currency, GoalStatus, Intent, Language, TransactionType
from uflow.parser.errors import InterpretError, InterpretErrorCode
from uflow.parser.normalize_input import normalize_utterance
from uflow.parser.extract_language import detect_language
from uflow.parser.extract_date import resolve_date
from uflow.parser.extract_amount import extract_amount, strip_amount
from uflow.parser.extract_currency import resolve_currency
from uflow.parser.extract_category import FALLBACK_CATEGORY, allowed_categories, classify_category
from uflow.parser.extract_intent import IntentDecision, classify_intent, has_digit

__all__ = [
    "Currency",
    "GoalStatus",
    "Intent",
    "Language",
    "TransactionType",
    "InterpretError",
    "InterpretErrorCode",
    "normalize_utterance",
    "detect_language",
    "resolve_date",
    "extract_amount",
    "strip_amount",
    "resolve_currency",
    "FALLBACK_CATEGORY",
    "allowed_categories",
    "classify_category",
    "IntentDecision",
    "classify_intent",
    "has_digit",
]
