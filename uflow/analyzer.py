# -*- coding: utf-8 -*-
"""
Ledger analysis for query intents.

Checked in order, first match answers:
1. category spend: a known category plus a "how much / spent" word
2. top expenses: a superlative word; top 3 categories by converted total
3. advice: a savings/advice word; static coaching text
4. usage hint

Every amount goes through the converter with its own transaction currency
before being summed in the ledger's base currency.
"""

import logging
from typing import Optional

from uflow.exchange_rate import CurrencyConverter
from uflow.formatters import format_money
from uflow.ledger import LedgerSnapshot
from uflow.parser.extract_category import FALLBACK_CATEGORY, classify_category
from uflow.parser.extract_language import word_pattern
from uflow.parser.types import Language

logger = logging.getLogger(__name__)

TOP_N = 3

_SPEND_PATTERN = word_pattern((
    "how much", "cuánto", "cuanto", "spent", "spend", "gasté", "gaste",
    "gastado", "gastamos",
))

_SUPERLATIVE_PATTERN = word_pattern(("top", "mayor", "mayores", "highest", "biggest", "más", "mas"))

_ADVICE_PATTERN = word_pattern((
    "consejo", "consejos", "recomienda", "recomendación", "ahorrar", "ahorro",
    "advice", "tip", "tips", "save", "saving", "savings",
))

_MESSAGES = {
    "category_total": {
        Language.ES: "Has gastado {money} en {category}.",
        Language.EN: "You have spent {money} on {category}.",
    },
    "top_header": {
        Language.ES: "📊 Tus mayores gastos:",
        Language.EN: "📊 Your top expenses:",
    },
    "no_data": {
        Language.ES: "Aún no hay suficientes datos para analizar tus gastos.",
        Language.EN: "Not enough data yet to analyze your expenses.",
    },
    "advice": {
        Language.ES: (
            "💡 Prueba la regla 50/30/20: 50% de tus ingresos para necesidades, "
            "30% para gustos y 20% para ahorro. Revisa tus suscripciones y los "
            "gastos hormiga cada mes."
        ),
        Language.EN: (
            "💡 Try the 50/30/20 rule: 50% of your income for needs, 30% for wants "
            "and 20% for savings. Review your subscriptions and small recurring "
            "expenses every month."
        ),
    },
    "usage": {
        Language.ES: (
            "Puedo registrar gastos e ingresos («gasté 50k en almuerzo»), crear metas "
            "(«meta de ahorro 2 millones») o responder preguntas como «¿cuánto gasté "
            "en comida?» o «¿cuáles son mis mayores gastos?»."
        ),
        Language.EN: (
            "I can record expenses and income (\"spent 50k on lunch\"), create goals "
            "(\"savings goal 2000 usd\") or answer questions like \"how much did I "
            "spend on food?\" or \"what are my top expenses?\"."
        ),
    },
}


class AnalysisEngine:
    """Answers analytical questions from a ledger snapshot."""

    def __init__(self, converter: Optional[CurrencyConverter] = None):
        self.converter = converter or CurrencyConverter()

    def analyze(self, text: str, lang: Language, ledger: LedgerSnapshot) -> str:
        lowered = (text or "").lower()

        category = classify_category(lowered)
        if category != FALLBACK_CATEGORY and _SPEND_PATTERN.search(lowered):
            return self._category_spend(category, lang, ledger)

        if _SUPERLATIVE_PATTERN.search(lowered):
            return self._top_expenses(lang, ledger)

        if _ADVICE_PATTERN.search(lowered):
            logger.debug("Advice query")
            return _MESSAGES["advice"][lang]

        logger.debug("No analysis rule matched, returning usage hint")
        return _MESSAGES["usage"][lang]

    def category_total(self, category: str, ledger: LedgerSnapshot) -> float:
        """Sum of expenses in ``category``, in the ledger's base currency."""
        wanted = category.lower()
        return sum(
            self.converter.convert(tx.amount, tx.currency, ledger.base_currency)
            for tx in ledger.expenses()
            if tx.category.lower() == wanted
        )

    def expenses_by_category(self, ledger: LedgerSnapshot) -> list[tuple[str, float]]:
        """
        Converted expense totals per category, largest first.

        Ties keep the order in which categories first appear in the ledger.
        """
        totals: dict[str, float] = {}
        for tx in ledger.expenses():
            converted = self.converter.convert(tx.amount, tx.currency, ledger.base_currency)
            totals[tx.category] = totals.get(tx.category, 0.0) + converted
        return sorted(totals.items(), key=lambda item: item[1], reverse=True)

    def _category_spend(self, category: str, lang: Language, ledger: LedgerSnapshot) -> str:
        total = self.category_total(category, ledger)
        logger.info(f"Category spend query: {category} = {total} {ledger.base_currency}")
        return _MESSAGES["category_total"][lang].format(
            money=format_money(total, ledger.base_currency, lang),
            category=category,
        )

    def _top_expenses(self, lang: Language, ledger: LedgerSnapshot) -> str:
        ranking = self.expenses_by_category(ledger)[:TOP_N]
        if not ranking:
            return _MESSAGES["no_data"][lang]

        lines = [_MESSAGES["top_header"][lang]]
        for category, total in ranking:
            lines.append(f"• {category}: {format_money(total, ledger.base_currency, lang)}")
        logger.info(f"Top expenses query: {len(ranking)} categories")
        return "\n".join(lines)
