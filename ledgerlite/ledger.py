"""
Expense Ledger for LedgerLite

This module ties storage, queries and auditing together and defines
the flows behind each menu option:
1. Add (load → append → save)
2. List / Search (load → filter → sort)
3. Delete (load → sort → remove by position → save)
4. Monthly summary (load → month filter → group and sum)

DESIGN DECISION: The ledger holds no records between calls.
Every flow starts from a fresh load, so what the user sees is always
what is in the file. Positions handed to delete_at() refer to the
ascending date order produced by list_expenses().
"""

from typing import Optional
from uuid import UUID

from ledgerlite.audit import AuditLogger
from ledgerlite.models.expense import Expense, MonthlySummary
from ledgerlite.queries import (
    filter_by_category,
    filter_by_month,
    format_month_label,
    group_and_sum,
    sort_by_date,
)
from ledgerlite.services.storage import (
    ExpenseStorageInterface,
    FlatFileExpenseStorage,
    StorageError,
)


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class InvalidIndexError(LedgerError):
    """A delete position outside the listed range."""

    def __init__(self, position: int, available: int):
        self.position = position
        self.available = available
        super().__init__(
            f"Position {position} is out of range for {available} expense(s)"
        )


class ExpenseLedger:
    """
    Runs the load-then-save flows against a storage backend.
    """

    def __init__(
        self,
        storage: Optional[ExpenseStorageInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage or FlatFileExpenseStorage()
        self._audit_logger = audit_logger or AuditLogger()

    def _load(self, correlation_id: Optional[UUID]) -> list[Expense]:
        try:
            expenses = self._storage.load()
        except StorageError as e:
            self._audit_logger.log_storage_error(str(e), correlation_id)
            raise
        self._audit_logger.log_records_loaded(len(expenses), correlation_id)
        return expenses

    def _save(self, expenses: list[Expense], correlation_id: Optional[UUID]) -> None:
        try:
            self._storage.save(expenses)
        except StorageError as e:
            self._audit_logger.log_storage_error(str(e), correlation_id)
            raise
        self._audit_logger.log_records_saved(len(expenses), correlation_id)

    def list_expenses(
        self,
        newest_first: bool = False,
        correlation_id: Optional[UUID] = None,
    ) -> list[Expense]:
        """All expenses, sorted by date."""
        return sort_by_date(self._load(correlation_id), newest_first=newest_first)

    def add_expense(
        self,
        expense: Expense,
        correlation_id: Optional[UUID] = None,
        had_warnings: bool = False,
    ) -> None:
        """Append an expense and rewrite the backing file."""
        expenses = self._load(correlation_id)
        expenses.append(expense)
        self._save(expenses, correlation_id)
        self._audit_logger.log_expense_added(
            expense,
            correlation_id=correlation_id,
            had_warnings=had_warnings,
        )

    def search_by_category(
        self,
        category: str,
        newest_first: bool = False,
        correlation_id: Optional[UUID] = None,
    ) -> list[Expense]:
        """Expenses in one category, sorted by date."""
        matches = filter_by_category(self._load(correlation_id), category)
        return sort_by_date(matches, newest_first=newest_first)

    def delete_at(
        self,
        position: int,
        correlation_id: Optional[UUID] = None,
    ) -> Expense:
        """
        Remove the expense at a 0-based position of the ascending date list.

        Raises:
            InvalidIndexError: If the position is not listed. Nothing is saved.
        """
        expenses = sort_by_date(self._load(correlation_id))
        if not 0 <= position < len(expenses):
            raise InvalidIndexError(position, len(expenses))

        removed = expenses.pop(position)
        self._save(expenses, correlation_id)
        self._audit_logger.log_expense_deleted(
            removed,
            position=position,
            correlation_id=correlation_id,
        )
        return removed

    def monthly_summary(
        self,
        month: str,
        correlation_id: Optional[UUID] = None,
    ) -> Optional[MonthlySummary]:
        """
        Category totals for a YYYY-MM month.

        Returns None if no expense falls in that month.
        """
        in_month = filter_by_month(self._load(correlation_id), month)
        if not in_month:
            return None

        grouped = group_and_sum(in_month)
        summary = MonthlySummary(
            month=month,
            label=format_month_label(month),
            totals=grouped.totals,
            grand_total=grouped.grand_total,
            expense_count=len(in_month),
        )
        self._audit_logger.log_summary_generated(
            month=month,
            expense_count=summary.expense_count,
            grand_total=str(summary.grand_total),
            totals={name: str(total) for name, total in grouped.as_dict().items()},
            correlation_id=correlation_id,
        )
        return summary

    def is_empty(self, correlation_id: Optional[UUID] = None) -> bool:
        return not self._load(correlation_id)
