# -*- coding: utf-8 -*-
"""
Intent Classification

Combines keyword sets with the presence of a digit. Evaluation order:
1. goal: goal keyword and a digit
2. income / expense keywords; salary words force income
3. analysis: analysis keyword and no digit
4. resolution: analysis candidate, or no signal at all -> query;
   goal -> create goal; otherwise -> create transaction

The zero-amount downgrade to ``unknown`` happens when the draft is built,
since it needs the extracted amount.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from uflow.parser.extract_language import word_pattern
from uflow.parser.types import Intent, Language, TransactionType

logger = logging.getLogger(__name__)

_GOAL_KEYWORDS = ("goal", "meta", "ahorro", "save", "objetivo")

_INCOME_KEYWORDS = (
    "recibí", "recibi", "me pagaron", "cobré", "vendí", "gané", "ingreso",
    "received", "earned", "got paid", "income", "sold",
)

# Salary words are also Salary category keywords; they always mean income.
_SALARY_KEYWORDS = ("sueldo", "salario", "nómina", "nomina", "salary", "paycheck", "payroll")

_EXPENSE_KEYWORDS = (
    "gasté", "gaste", "gasto", "pagué", "pague", "compré", "compre", "me costó",
    "spent", "spend", "paid", "bought", "expense",
)

# Matched as whole words so that "mas" does not fire inside "mascota"
_ANALYSIS_PATTERN = word_pattern((
    "cuánto", "cuanto", "cuáles", "cuales", "how much", "what are", "top",
    "mayor", "mayores", "highest", "biggest", "más", "mas", "consejo",
    "consejos", "advice", "tip", "tips", "resumen", "summary", "analiza",
    "analyze",
))

_DIGIT_PATTERN = re.compile(r"\d")


@dataclass(frozen=True)
class IntentDecision:
    """Classifier output: the intent plus the flags that produced it."""

    intent: Intent
    is_income: bool = False
    is_expense: bool = False
    is_goal: bool = False
    is_analysis: bool = False
    has_number: bool = False
    draft: Optional[str] = None  # "transaction" | "goal" when intent is CREATE

    @property
    def transaction_type(self) -> TransactionType:
        """Income keywords win over expense keywords; ambiguity means expense."""
        return TransactionType.INCOME if self.is_income else TransactionType.EXPENSE


def has_digit(text: str) -> bool:
    return bool(_DIGIT_PATTERN.search(text or ""))


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify_intent(text: str, lang: Language, has_number: bool) -> IntentDecision:
    """
    Classify an utterance.

    Args:
        text: utterance
        lang: detected language (logged only; keyword sets are bilingual)
        has_number: whether the utterance contains a digit

    Returns:
        IntentDecision
    """
    lowered = (text or "").lower()

    is_goal = _contains_any(lowered, _GOAL_KEYWORDS) and has_number
    is_income = _contains_any(lowered, _INCOME_KEYWORDS) or _contains_any(lowered, _SALARY_KEYWORDS)
    is_expense = _contains_any(lowered, _EXPENSE_KEYWORDS)
    is_analysis = bool(_ANALYSIS_PATTERN.search(lowered)) and not has_number

    flags = dict(
        is_income=is_income,
        is_expense=is_expense,
        is_goal=is_goal,
        is_analysis=is_analysis,
        has_number=has_number,
    )

    if is_analysis or not (is_income or is_expense or is_goal or has_number):
        decision = IntentDecision(intent=Intent.QUERY, **flags)
    elif is_goal:
        decision = IntentDecision(intent=Intent.CREATE, draft="goal", **flags)
    else:
        decision = IntentDecision(intent=Intent.CREATE, draft="transaction", **flags)

    logger.debug(f"Intent [{lang.value}] {decision}")
    return decision
