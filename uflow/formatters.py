# -*- coding: utf-8 -*-
"""
Reply formatters: localized money strings and draft confirmations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uflow.parser.types import Language, TransactionType

if TYPE_CHECKING:
    from uflow.interpreter import GoalDraft, TransactionDraft

_SYMBOLS = {
    "COP": "$",
    "USD": "US$",
    "EUR": "€",
}

_EN_SYMBOLS = {
    "COP": "COP $",
    "USD": "$",
    "EUR": "€",
}


def format_money(amount: float, currency: str, lang: Language, show_cents: bool = False) -> str:
    """
    Format an amount the way the app displays it.

    COP has no cents unless ``show_cents``; USD/EUR always show 2 decimals.
    Spanish groups with dots and uses a decimal comma; English the reverse.

    Examples:
        >>> format_money(1234567, "COP", Language.ES)
        '$ 1.234.567'
        >>> format_money(1234567, "COP", Language.EN)
        'COP $1,234,567'
        >>> format_money(15, "USD", Language.EN)
        '$15.00'
    """
    code = currency.upper()
    decimals = (2 if show_cents else 0) if code == "COP" else 2
    number = f"{amount:,.{decimals}f}"

    if lang == Language.ES:
        number = number.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"{_SYMBOLS.get(code, code)} {number}"

    return f"{_EN_SYMBOLS.get(code, code + ' ')}{number}"


def format_transaction_confirmation(draft: "TransactionDraft", lang: Language) -> str:
    """Confirmation text for a transaction draft."""
    money = format_money(draft.amount, draft.currency.value, lang)
    day = draft.date.strftime("%Y-%m-%d")

    if lang == Language.ES:
        kind = "Ingreso" if draft.type == TransactionType.INCOME else "Gasto"
        return f"✅ ¡Listo! {kind} de {money} en {draft.category} ({day})."

    kind = "Income" if draft.type == TransactionType.INCOME else "Expense"
    return f"✅ Done! {kind} of {money} in {draft.category} ({day})."


def format_goal_confirmation(draft: "GoalDraft", lang: Language) -> str:
    """Confirmation text for a goal draft."""
    money = format_money(draft.target_amount, draft.currency.value, lang)

    if lang == Language.ES:
        return f"🎯 Meta «{draft.name}» creada por {money}."
    return f"🎯 Goal \"{draft.name}\" set for {money}."
