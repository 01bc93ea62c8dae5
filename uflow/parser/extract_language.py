# -*- coding: utf-8 -*-
"""
Language Detection

Scores the utterance against two closed word lists (Spanish / English
function and verb words). The list with strictly more whole-word hits wins;
a tie, including zero hits on both sides, keeps the caller's default.
"""

import re
from functools import lru_cache

from uflow.parser.types import Language

_SPANISH_WORDS = (
    "gasté", "gaste", "gasto", "gastos", "gastado", "pagué", "pague", "pagaron",
    "compré", "compre", "recibí", "recibi", "cobré", "cuánto", "cuanto",
    "cuáles", "cuales", "mis", "mi", "me", "en", "el", "la", "los", "las",
    "de", "del", "para", "por", "que", "con", "un", "una", "ayer", "hoy",
    "anoche", "mañana", "hace", "días", "meta", "ahorro", "sueldo", "dame",
    "consejo", "consejos", "mayores", "cuál",
)

_ENGLISH_WORDS = (
    "i", "my", "the", "on", "in", "for", "of", "to", "and", "how", "much",
    "what", "did", "spent", "spend", "paid", "bought", "received", "got",
    "salary", "yesterday", "today", "tomorrow", "ago", "days", "top",
    "expenses", "advice", "goal", "save", "savings", "give", "is", "are",
)


def word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    """Compile a boundary-aware alternation (accented letters count as word chars)."""
    alternation = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")


@lru_cache(maxsize=1)
def _patterns() -> tuple[re.Pattern[str], re.Pattern[str]]:
    return word_pattern(_SPANISH_WORDS), word_pattern(_ENGLISH_WORDS)


def detect_language(text: str, default: Language = Language.ES) -> Language:
    """
    Detect the dominant language of an utterance.

    Args:
        text: raw utterance
        default: returned on a tie or when nothing matches

    Returns:
        Language.ES or Language.EN
    """
    if not text:
        return default

    lowered = text.lower()
    spanish, english = _patterns()
    es_hits = len(spanish.findall(lowered))
    en_hits = len(english.findall(lowered))

    if es_hits > en_hits:
        return Language.ES
    if en_hits > es_hits:
        return Language.EN
    return default
