"""
Query and Aggregation Functions

DESIGN DECISION: Queries are plain functions over a list of expenses.
They never touch storage; the ledger loads the list and hands it over.
That keeps every query deterministic and trivially testable.

Dates are compared as YYYY-MM-DD text. Because the format is fixed
width, lexicographic order is chronological order.
"""

from datetime import date
from decimal import Decimal

from ledgerlite.models.expense import (
    CategorySummary,
    CategoryTotal,
    Expense,
    ExpenseCategory,
)


def filter_by_category(expenses: list[Expense], category: str) -> list[Expense]:
    """Case-insensitive exact category match."""
    needle = category.strip().lower()
    return [e for e in expenses if e.category.lower() == needle]


def filter_by_month(expenses: list[Expense], month: str) -> list[Expense]:
    """Keep expenses whose date starts with the YYYY-MM prefix."""
    return [e for e in expenses if e.date.startswith(month)]


def sort_by_date(expenses: list[Expense], newest_first: bool = False) -> list[Expense]:
    """
    Sort by date string. Ascending unless newest_first is set.

    The sort is stable, so expenses on the same day keep file order.
    """
    return sorted(expenses, key=lambda e: e.date, reverse=newest_first)


def _group_key(category: str) -> str:
    # Known categories group by display name, so "food" and "Food" merge
    known = ExpenseCategory.lookup(category)
    return known.value if known else category


def group_and_sum(expenses: list[Expense]) -> CategorySummary:
    """
    Group expenses by category and sum each group.

    Groups come back ordered by descending total. Equal totals keep
    the order in which their category was first seen.
    """
    groups: dict[str, CategoryTotal] = {}
    grand_total = Decimal("0")

    for expense in expenses:
        key = _group_key(expense.category)
        if key not in groups:
            groups[key] = CategoryTotal(category=key)
        group = groups[key]
        group.total += expense.amount
        group.count += 1
        grand_total += expense.amount

    ordered = sorted(groups.values(), key=lambda g: g.total, reverse=True)
    return CategorySummary(totals=ordered, grand_total=grand_total)


def current_month(today: date) -> str:
    return today.strftime("%Y-%m")


def format_month_label(month: str) -> str:
    """Turn '2025-08' into 'August 2025'."""
    year, month_number = month.split("-")
    return date(int(year), int(month_number), 1).strftime("%B %Y")
