# -*- coding: utf-8 -*-
"""
Interpreter entry points.

Result and draft types, the ``Interpreter`` interface shared by the local
rule engine and the remote-model engines, and the local engine itself.

Usage:
    from uflow.interpreter import LocalInterpreter, InterpretContext
    result = LocalInterpreter().interpret("gasté 20k en uber ayer", InterpretContext())
    result.structured.data.amount  # 20000.0
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from uflow import config
from uflow.analyzer import AnalysisEngine
from uflow.formatters import format_goal_confirmation, format_transaction_confirmation
from uflow.ledger import LedgerSnapshot
from uflow.parser import (
    FALLBACK_CATEGORY,
    Currency,
    GoalStatus,
    Intent,
    IntentDecision,
    InterpretError,
    InterpretErrorCode,
    Language,
    TransactionType,
    classify_category,
    classify_intent,
    detect_language,
    extract_amount,
    has_digit,
    normalize_utterance,
    resolve_currency,
    resolve_date,
    strip_amount,
)

logger = logging.getLogger(__name__)

INCOME_FALLBACK_CATEGORY = "Salary"

_DEFAULT_GOAL_NAMES = {
    Language.ES: "Nueva meta",
    Language.EN: "New goal",
}


@dataclass(frozen=True)
class TransactionDraft:
    """Unsaved transaction; the action sink assigns id and createdAt."""

    type: TransactionType
    amount: float
    currency: Currency
    category: str
    note: str
    date: datetime
    account_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "amount": self.amount,
            "currency": self.currency.value,
            "category": self.category,
            "note": self.note,
            "date": self.date.isoformat(),
            "accountId": self.account_id,
        }


@dataclass(frozen=True)
class GoalDraft:
    """Unsaved savings goal."""

    name: str
    target_amount: float
    currency: Currency
    current_amount: float = 0.0
    status: GoalStatus = GoalStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "targetAmount": self.target_amount,
            "currentAmount": self.current_amount,
            "currency": self.currency.value,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class StructuredPayload:
    type: str  # "transaction" | "goal"
    data: Union[TransactionDraft, GoalDraft]

    def to_dict(self) -> dict:
        return {"type": self.type, "data": self.data.to_dict()}


@dataclass(frozen=True)
class InterpretationResult:
    """
    One interpretation.

    ``structured`` is present if and only if ``intent`` is CREATE.
    """

    text: str
    lang: Language
    intent: Intent
    structured: Optional[StructuredPayload] = None

    def __post_init__(self) -> None:
        if (self.intent == Intent.CREATE) != (self.structured is not None):
            raise ValueError(f"structured payload must accompany create intents only (intent={self.intent.value})")

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {
            "text": self.text,
            "lang": self.lang.value,
            "intent": self.intent.value,
        }
        if self.structured is not None:
            payload["structured"] = self.structured.to_dict()
        return payload


@dataclass
class InterpretContext:
    """Caller-supplied defaults and read-only ledger for one call."""

    default_language: Language = Language.ES
    default_currency: Currency = Currency.COP
    ledger: LedgerSnapshot = field(default_factory=LedgerSnapshot)
    now: Optional[datetime] = None
    # Remote engines only
    previous_summary: Optional[str] = None
    messages: list[dict] = field(default_factory=list)
    force_create: bool = False

    def reference_time(self) -> datetime:
        return self.now or datetime.now(ZoneInfo(config.TIMEZONE))


def unknown_result(error: InterpretError) -> InterpretationResult:
    return InterpretationResult(text=error.message, lang=error.lang, intent=Intent.UNKNOWN)


class Interpreter(ABC):
    """
    Common contract of the local rule engine and the remote-model engines.

    Implementations never raise for a bad utterance; they answer with an
    ``unknown`` result instead.
    """

    name: str = ""

    @abstractmethod
    def interpret(self, utterance: str, context: InterpretContext) -> InterpretationResult:
        """
        Interpret one utterance.

        Args:
            utterance: raw user text
            context: defaults, ledger snapshot and reference time

        Returns:
            InterpretationResult
        """
        pass


class LocalInterpreter(Interpreter):
    """Deterministic keyword/regex engine."""

    name = "local"

    def __init__(self, analyzer: Optional[AnalysisEngine] = None):
        self.analyzer = analyzer or AnalysisEngine()

    def interpret(self, utterance: str, context: InterpretContext) -> InterpretationResult:
        text = normalize_utterance(utterance)
        if not text:
            return unknown_result(
                InterpretError.from_code(InterpretErrorCode.EMPTY_MESSAGE, context.default_language)
            )

        # 1. Language first: amount separators and "$" depend on it
        lang = detect_language(text, context.default_language)

        # 2. Independent extractions
        amount = extract_amount(text, lang)
        currency = resolve_currency(text, context.default_currency, lang)
        category = classify_category(text)
        date = resolve_date(text, context.reference_time())

        # 3. Intent
        decision = classify_intent(text, lang, has_digit(text))
        logger.info(f"Interpreted [{lang.value}] intent={decision.intent.value} draft={decision.draft}")

        if decision.intent == Intent.QUERY:
            answer = self.analyzer.analyze(text, lang, context.ledger)
            return InterpretationResult(text=answer, lang=lang, intent=Intent.QUERY)

        # 4. Drafts
        try:
            if decision.draft == "goal":
                goal = self._build_goal(text, lang, amount, currency)
                return InterpretationResult(
                    text=format_goal_confirmation(goal, lang),
                    lang=lang,
                    intent=Intent.CREATE,
                    structured=StructuredPayload(type="goal", data=goal),
                )

            transaction = self._build_transaction(
                text, lang, decision, amount, currency, category, date, context.ledger
            )
            return InterpretationResult(
                text=format_transaction_confirmation(transaction, lang),
                lang=lang,
                intent=Intent.CREATE,
                structured=StructuredPayload(type="transaction", data=transaction),
            )
        except InterpretError as e:
            logger.warning(f"Draft rejected: {e.code.value}")
            return unknown_result(e)

    def _build_transaction(
        self,
        text: str,
        lang: Language,
        decision: IntentDecision,
        amount: float,
        currency: Currency,
        category: str,
        date: datetime,
        ledger: LedgerSnapshot,
    ) -> TransactionDraft:
        if amount <= 0:
            raise InterpretError.from_code(InterpretErrorCode.MISSING_AMOUNT, lang)

        tx_type = decision.transaction_type
        if tx_type == TransactionType.INCOME and category == FALLBACK_CATEGORY:
            category = INCOME_FALLBACK_CATEGORY

        return TransactionDraft(
            type=tx_type,
            amount=amount,
            currency=currency,
            category=category,
            note=text,
            date=date,
            account_id=ledger.default_account_id(),
        )

    def _build_goal(self, text: str, lang: Language, amount: float, currency: Currency) -> GoalDraft:
        if amount <= 0:
            raise InterpretError.from_code(InterpretErrorCode.MISSING_GOAL_AMOUNT, lang)

        name = strip_amount(text, lang)
        name = name[:1].upper() + name[1:] if name else _DEFAULT_GOAL_NAMES[lang]
        return GoalDraft(name=name, target_amount=amount, currency=currency)
