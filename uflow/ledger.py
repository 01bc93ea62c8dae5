# -*- coding: utf-8 -*-
"""
Ledger snapshot types (read-only).

The analyzer only reads these. Callers whose ledger can change while an
interpretation runs must hand over a snapshot, not a live view; the frozen
dataclasses and tuples here make a loaded snapshot immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from uflow.parser.types import TransactionType


@dataclass(frozen=True)
class Account:
    id: str
    name: str
    currency: str


@dataclass(frozen=True)
class LedgerTransaction:
    """One stored transaction."""

    type: TransactionType
    amount: float
    currency: str
    category: str
    date: str = ""                   # ISO string
    note: str = ""
    account_id: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class LedgerSnapshot:
    """Transactions in ledger order, accounts, and the reporting currency."""

    base_currency: str = "COP"
    transactions: tuple[LedgerTransaction, ...] = field(default_factory=tuple)
    accounts: tuple[Account, ...] = field(default_factory=tuple)

    def expenses(self) -> Iterable[LedgerTransaction]:
        return (tx for tx in self.transactions if tx.type == TransactionType.EXPENSE)

    def default_account_id(self) -> Optional[str]:
        """First account, as the manual entry form preselects it."""
        return self.accounts[0].id if self.accounts else None

    @classmethod
    def empty(cls, base_currency: str = "COP") -> "LedgerSnapshot":
        return cls(base_currency=base_currency)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LedgerSnapshot":
        """
        Build a snapshot from the JSON shape used by the app.

        Accepts ``baseCurrency`` (or ``base_currency``), ``transactions`` with
        ``type/amount/currency/category/date`` and optional
        ``note/accountId/id``, and ``accounts`` with ``id/name/currency``.
        """
        base = payload.get("baseCurrency") or payload.get("base_currency") or "COP"

        transactions = tuple(
            LedgerTransaction(
                type=TransactionType.from_string(str(item["type"])),
                amount=float(item["amount"]),
                currency=str(item.get("currency") or base).upper(),
                category=str(item.get("category") or ""),
                date=str(item.get("date") or ""),
                note=str(item.get("note") or ""),
                account_id=item.get("accountId"),
                id=item.get("id"),
            )
            for item in payload.get("transactions") or []
        )

        accounts = tuple(
            Account(
                id=str(item["id"]),
                name=str(item.get("name") or ""),
                currency=str(item.get("currency") or base).upper(),
            )
            for item in payload.get("accounts") or []
        )

        return cls(base_currency=str(base).upper(), transactions=transactions, accounts=accounts)

    def to_context_dict(self, limit: int = 10) -> dict:
        """Camel-case view sent to the remote engines (last ``limit`` transactions)."""
        recent = self.transactions[-limit:] if limit else self.transactions
        return {
            "currencyBase": self.base_currency,
            "transactions": [
                {
                    "id": tx.id,
                    "type": tx.type.value,
                    "amount": tx.amount,
                    "currency": tx.currency,
                    "accountId": tx.account_id,
                    "category": tx.category,
                    "note": tx.note,
                    "date": tx.date,
                }
                for tx in recent
            ],
            "accounts": [
                {"id": acc.id, "name": acc.name, "currency": acc.currency}
                for acc in self.accounts
            ],
        }
