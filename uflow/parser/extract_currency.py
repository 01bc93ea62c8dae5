# -*- coding: utf-8 -*-
"""
Currency Resolution

Priority (strict):
1. explicit currency words / codes, case-insensitive substrings
2. the ambiguous "$" symbol, read through the detected language
   (en -> USD, es -> COP)
3. the caller's default
"""

from uflow.parser.types import Currency, Language

# Checked in order; the first currency with a hit wins
_CURRENCY_WORDS: tuple[tuple[Currency, tuple[str, ...]], ...] = (
    (Currency.USD, ("dollar", "dólar", "dolar", "usd")),
    (Currency.EUR, ("euro", "eur", "€")),
    (Currency.COP, ("peso", "cop")),
)

_AMBIGUOUS_SYMBOL = "$"

_SYMBOL_BY_LANGUAGE = {
    Language.EN: Currency.USD,
    Language.ES: Currency.COP,
}


def resolve_currency(text: str, default: Currency, lang: Language) -> Currency:
    """
    Resolve the currency of an utterance. Always returns a value.

    Examples:
        >>> resolve_currency("$100 usd", Currency.COP, Language.ES)
        <Currency.USD: 'USD'>
        >>> resolve_currency("$100", Currency.EUR, Language.EN)
        <Currency.USD: 'USD'>
        >>> resolve_currency("100", Currency.EUR, Language.ES)
        <Currency.EUR: 'EUR'>
    """
    lowered = (text or "").lower()

    for currency, words in _CURRENCY_WORDS:
        if any(word in lowered for word in words):
            return currency

    if _AMBIGUOUS_SYMBOL in lowered:
        return _SYMBOL_BY_LANGUAGE[lang]

    return default
