# -*- coding: utf-8 -*-
"""
Interpretation error types.

The draft builders raise these; the local interpreter turns them into an
``unknown`` result carrying the localized clarifying message.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from uflow.parser.types import Language


class InterpretErrorCode(Enum):
    """Interpretation error codes"""

    EMPTY_MESSAGE = "empty_message"              # nothing to interpret
    MISSING_AMOUNT = "missing_amount"            # transaction without amount
    MISSING_GOAL_AMOUNT = "missing_goal_amount"  # goal without target


# Localized message templates
ERROR_MESSAGES = {
    InterpretErrorCode.EMPTY_MESSAGE: {
        Language.ES: "Escribe algo como «gasté 50k en almuerzo» o «¿cuánto gasté en comida?».",
        Language.EN: "Try something like \"spent 50k on lunch\" or \"how much did I spend on food?\".",
    },
    InterpretErrorCode.MISSING_AMOUNT: {
        Language.ES: "No encontré el monto. ¿Cuánto fue? Por ejemplo: «gasté 20k en uber».",
        Language.EN: "I couldn't find the amount. How much was it? For example: \"spent 20k on uber\".",
    },
    InterpretErrorCode.MISSING_GOAL_AMOUNT: {
        Language.ES: "¿Cuál es el monto de la meta? Por ejemplo: «meta de ahorro 2 millones».",
        Language.EN: "What is the target amount? For example: \"savings goal 2000 usd\".",
    },
}


@dataclass
class InterpretError(Exception):
    """Raised while building a draft; never escapes the local interpreter."""

    code: InterpretErrorCode
    message: str
    lang: Language = Language.ES
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: InterpretErrorCode, lang: Language, **kwargs) -> "InterpretError":
        templates = ERROR_MESSAGES.get(code, {})
        template = templates.get(lang) or templates.get(Language.ES, "")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, lang=lang, details=kwargs if kwargs else None)
