"""Tests for query and aggregation functions."""

from datetime import date
from decimal import Decimal

from ledgerlite.models.expense import Expense
from ledgerlite.queries import (
    current_month,
    filter_by_category,
    filter_by_month,
    format_month_label,
    group_and_sum,
    sort_by_date,
)


def make(date_text, category, amount, description="x"):
    return Expense(date=date_text, description=description, category=category, amount=Decimal(amount))


class TestFilters:
    """Tests for category and month filters."""

    def test_filter_by_category_case_insensitive(self):
        expenses = [make("2025-08-01", "Food", "1"), make("2025-08-02", "food", "2"), make("2025-08-03", "Bills", "3")]
        assert len(filter_by_category(expenses, "FOOD")) == 2

    def test_filter_by_category_is_exact(self):
        expenses = [make("2025-08-01", "Food", "1")]
        assert filter_by_category(expenses, "Foo") == []

    def test_filter_by_month(self):
        august = make("2025-08-01", "Food", "1")
        september = make("2025-09-01", "Food", "2")
        assert filter_by_month([august, september], "2025-08") == [august]


class TestSortByDate:
    """Tests for date ordering."""

    def test_ascending_by_default(self, sample_expenses):
        dates = [e.date for e in sort_by_date(sample_expenses)]
        assert dates == ["2025-07-02", "2025-08-01", "2025-08-10", "2025-09-01"]

    def test_newest_first(self, sample_expenses):
        dates = [e.date for e in sort_by_date(sample_expenses, newest_first=True)]
        assert dates == ["2025-09-01", "2025-08-10", "2025-08-01", "2025-07-02"]

    def test_same_day_keeps_input_order(self):
        first = make("2025-08-01", "Food", "1", "first")
        second = make("2025-08-01", "Food", "2", "second")
        assert sort_by_date([first, second]) == [first, second]

    def test_does_not_mutate_input(self, sample_expenses):
        original = list(sample_expenses)
        sort_by_date(sample_expenses)
        assert sample_expenses == original


class TestGroupAndSum:
    """Tests for the per-category aggregation."""

    def test_totals_descending_with_grand_total(self):
        summary = group_and_sum([
            make("2025-08-01", "Food", "10"),
            make("2025-08-02", "Food", "5"),
            make("2025-08-03", "Bills", "20"),
        ])
        assert [(g.category, g.total) for g in summary.totals] == [
            ("Bills", Decimal("20")),
            ("Food", Decimal("15")),
        ]
        assert summary.grand_total == Decimal("35")

    def test_counts(self):
        summary = group_and_sum([make("2025-08-01", "Food", "10"), make("2025-08-02", "Food", "5")])
        assert summary.totals[0].count == 2

    def test_known_categories_merge_case(self):
        summary = group_and_sum([make("2025-08-01", "food", "1"), make("2025-08-02", "FOOD", "2")])
        assert summary.as_dict() == {"Food": Decimal("3")}

    def test_unknown_category_kept_as_entered(self):
        summary = group_and_sum([make("2025-08-01", "Groceries", "4")])
        assert summary.as_dict() == {"Groceries": Decimal("4")}

    def test_ties_keep_first_seen_order(self):
        summary = group_and_sum([
            make("2025-08-01", "Transport", "5"),
            make("2025-08-02", "Food", "5"),
        ])
        assert [g.category for g in summary.totals] == ["Transport", "Food"]

    def test_empty_input(self):
        summary = group_and_sum([])
        assert summary.totals == []
        assert summary.grand_total == Decimal("0")


class TestMonthHelpers:
    """Tests for month formatting helpers."""

    def test_current_month(self):
        assert current_month(date(2025, 8, 15)) == "2025-08"

    def test_format_month_label(self):
        assert format_month_label("2025-08") == "August 2025"
        assert format_month_label("2024-01") == "January 2024"
