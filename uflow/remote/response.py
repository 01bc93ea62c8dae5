# -*- coding: utf-8 -*-
"""
Model reply parsing.

Turns the raw reply of a remote engine into an ``InterpretationResult`` with
the same guarantees as the local engine:
- replies that are not JSON become a ``query`` carrying the raw text
- unknown intents become ``unknown``
- ``structured`` is kept only for ``create`` intents, and a create without a
  usable draft or with a zero amount is downgraded to ``unknown``
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from typing import Any, Optional

from uflow.formatters import format_goal_confirmation, format_transaction_confirmation
from uflow.interpreter import (
    INCOME_FALLBACK_CATEGORY,
    GoalDraft,
    InterpretationResult,
    InterpretContext,
    StructuredPayload,
    TransactionDraft,
    unknown_result,
)
from uflow.parser import (
    FALLBACK_CATEGORY,
    Currency,
    Intent,
    InterpretError,
    InterpretErrorCode,
    Language,
    TransactionType,
)

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*|\s*```$")


def strip_code_fences(text: str) -> str:
    """Remove a leading ```json / ``` fence and the trailing fence."""
    return _FENCE_PATTERN.sub("", (text or "").strip())


def _to_amount(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _to_language(value: Any, default: Language) -> Language:
    try:
        return Language.from_string(str(value))
    except ValueError:
        return default


def _to_currency(value: Any, default: Currency) -> Currency:
    if not value:
        return default
    try:
        return Currency.from_string(str(value))
    except ValueError:
        return default


def _to_datetime(value: Any, fallback: datetime) -> datetime:
    if not value:
        return fallback
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable date from model: {value}, using reference time")
        return fallback


def _transaction_from_data(data: dict, lang: Language, context: InterpretContext) -> TransactionDraft:
    amount = _to_amount(data.get("amount"))
    if amount <= 0:
        raise InterpretError.from_code(InterpretErrorCode.MISSING_AMOUNT, lang)

    try:
        tx_type = TransactionType.from_string(str(data.get("type") or "expense"))
    except ValueError:
        tx_type = TransactionType.EXPENSE

    category = str(data.get("category") or FALLBACK_CATEGORY)
    if tx_type == TransactionType.INCOME and category == FALLBACK_CATEGORY:
        category = INCOME_FALLBACK_CATEGORY

    return TransactionDraft(
        type=tx_type,
        amount=amount,
        currency=_to_currency(data.get("currency"), context.default_currency),
        category=category,
        note=str(data.get("note") or ""),
        date=_to_datetime(data.get("date"), context.reference_time()),
        account_id=context.ledger.default_account_id(),
    )


def _goal_from_data(data: dict, lang: Language, context: InterpretContext) -> GoalDraft:
    target = _to_amount(data.get("targetAmount", data.get("target_amount")))
    if target <= 0:
        raise InterpretError.from_code(InterpretErrorCode.MISSING_GOAL_AMOUNT, lang)

    return GoalDraft(
        name=str(data.get("name") or ("Nueva meta" if lang == Language.ES else "New goal")),
        target_amount=target,
        currency=_to_currency(data.get("currency"), context.default_currency),
        current_amount=_to_amount(data.get("currentAmount")),
    )


def result_from_payload(payload: dict, context: InterpretContext) -> InterpretationResult:
    """Build a result from an already-decoded reply."""
    lang = _to_language(payload.get("lang"), context.default_language)
    text = str(payload.get("text") or "")

    try:
        intent = Intent(payload.get("intent"))
    except ValueError:
        intent = Intent.UNKNOWN

    if intent != Intent.CREATE:
        return InterpretationResult(text=text, lang=lang, intent=intent)

    structured = payload.get("structured")
    kind: Optional[str] = structured.get("type") if isinstance(structured, dict) else None
    data = structured.get("data") if isinstance(structured, dict) else None
    if kind not in ("transaction", "goal") or not isinstance(data, dict):
        logger.warning("Model returned a create intent without a usable draft")
        return InterpretationResult(text=text, lang=lang, intent=Intent.UNKNOWN)

    try:
        if kind == "goal":
            goal = _goal_from_data(data, lang, context)
            return InterpretationResult(
                text=text or format_goal_confirmation(goal, lang),
                lang=lang,
                intent=Intent.CREATE,
                structured=StructuredPayload(type="goal", data=goal),
            )

        transaction = _transaction_from_data(data, lang, context)
        return InterpretationResult(
            text=text or format_transaction_confirmation(transaction, lang),
            lang=lang,
            intent=Intent.CREATE,
            structured=StructuredPayload(type="transaction", data=transaction),
        )
    except InterpretError as e:
        logger.warning(f"Model draft rejected: {e.code.value}")
        return unknown_result(e)


def parse_model_response(raw: str, context: InterpretContext) -> InterpretationResult:
    """
    Parse a raw model reply.

    Args:
        raw: reply text, possibly fenced
        context: defaults used for missing fields

    Returns:
        InterpretationResult
    """
    cleaned = strip_code_fences(raw)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError:
        logger.debug("Model reply is not JSON, treating it as conversation")
        return InterpretationResult(text=(raw or "").strip(), lang=context.default_language, intent=Intent.QUERY)

    if not isinstance(payload, dict):
        return InterpretationResult(text=cleaned, lang=context.default_language, intent=Intent.QUERY)

    return result_from_payload(payload, context)
