# -*- coding: utf-8 -*-
"""
Shared enums for the rule engine, the analyzer and the remote engines.
"""

from enum import Enum


class Language(Enum):
    """Reply language."""

    ES = "es"
    EN = "en"

    @classmethod
    def from_string(cls, value: str) -> "Language":
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown language: {value}")


class Currency(Enum):
    """Closed currency set: COP is the base-like code."""

    COP = "COP"
    USD = "USD"
    EUR = "EUR"

    @classmethod
    def from_string(cls, value: str) -> "Currency":
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Unknown currency: {value}")


class TransactionType(Enum):
    """Ledger transaction type."""

    INCOME = "income"
    EXPENSE = "expense"
    ADJUSTMENT = "adjustment"

    @classmethod
    def from_string(cls, value: str) -> "TransactionType":
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown transaction type: {value}")


class Intent(Enum):
    """Outcome of one interpretation."""

    CREATE = "create"   # structured draft attached
    QUERY = "query"     # analytical answer
    UNKNOWN = "unknown" # clarifying message


class GoalStatus(Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
