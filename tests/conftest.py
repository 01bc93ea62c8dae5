from __future__ import annotations

from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from uflow.interpreter import InterpretContext
from uflow.ledger import Account, LedgerSnapshot, LedgerTransaction
from uflow.parser.types import Currency, Language, TransactionType


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        group = _top_level_tests_group(Path(str(item.fspath)))
        if group in ("unit", "parser"):
            item.add_marker(pytest.mark.unit)
        elif group == "integration":
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def bogota_now() -> datetime:
    """Fixed reference time: Wednesday 2025-03-12 15:30, Bogotá."""
    return datetime(2025, 3, 12, 15, 30, tzinfo=ZoneInfo("America/Bogota"))


@pytest.fixture
def sample_ledger() -> LedgerSnapshot:
    return LedgerSnapshot(
        base_currency="COP",
        transactions=(
            LedgerTransaction(TransactionType.EXPENSE, 50000, "COP", "Food", date="2025-03-01", id="t1"),
            LedgerTransaction(TransactionType.EXPENSE, 20000, "COP", "Transport", date="2025-03-02", id="t2"),
            LedgerTransaction(TransactionType.EXPENSE, 10, "USD", "Food", date="2025-03-03", id="t3"),
            LedgerTransaction(TransactionType.EXPENSE, 1200000, "COP", "Rent", date="2025-03-04", id="t4"),
            LedgerTransaction(TransactionType.EXPENSE, 30000, "COP", "Entertainment", date="2025-03-05", id="t5"),
            LedgerTransaction(TransactionType.INCOME, 3000000, "COP", "Salary", date="2025-03-01", id="t6"),
        ),
        accounts=(
            Account(id="acc-main", name="Bancolombia", currency="COP"),
            Account(id="acc-cash", name="Efectivo", currency="COP"),
        ),
    )


@pytest.fixture
def es_context(bogota_now, sample_ledger) -> InterpretContext:
    return InterpretContext(
        default_language=Language.ES,
        default_currency=Currency.COP,
        ledger=sample_ledger,
        now=bogota_now,
    )
