"""
Shared fixtures for LedgerLite tests.

No test touches the real working-directory expense.txt:
file tests use tmp_path, everything else uses in-memory storage.
"""

import os
from datetime import date
from decimal import Decimal

import pytest

from ledgerlite.config import get_settings
from ledgerlite.ledger import ExpenseLedger
from ledgerlite.models.expense import Expense
from ledgerlite.services.storage import InMemoryExpenseStorage


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, *answers: str):
        self._answers = iter(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Drop LEDGERLITE_* variables and any .env so defaults apply."""
    for name in list(os.environ):
        if name.startswith("LEDGERLITE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    return date(2025, 8, 15)


@pytest.fixture
def sample_expenses() -> list[Expense]:
    return [
        Expense(date="2025-08-10", description="Lunch", category="Food", amount=Decimal("12.50")),
        Expense(date="2025-07-02", description="Bus pass", category="Transport", amount=Decimal("40")),
        Expense(date="2025-08-01", description="Electricity", category="Bills", amount=Decimal("60.25")),
        Expense(date="2025-09-01", description="Cinema", category="Entertainment", amount=Decimal("15")),
    ]


@pytest.fixture
def memory_storage(sample_expenses) -> InMemoryExpenseStorage:
    return InMemoryExpenseStorage(sample_expenses)


@pytest.fixture
def ledger(memory_storage) -> ExpenseLedger:
    return ExpenseLedger(storage=memory_storage)


@pytest.fixture
def make_console():
    return ScriptedConsole
