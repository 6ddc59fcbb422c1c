"""
Tests for the interactive command loop.

Sessions are scripted: each test lists the answers the user would type,
and the loop ends when the script runs out or Exit is chosen.
"""

import pytest
from decimal import Decimal

from ledgerlite.config import AppSettings
from ledgerlite.console import ConsoleMenu, MenuOption, MenuState, parse_choice, render_menu
from ledgerlite.ledger import ExpenseLedger
from ledgerlite.models.expense import Expense
from ledgerlite.services.storage import FlatFileExpenseStorage, InMemoryExpenseStorage


@pytest.fixture
def run_session(make_console, today):
    """Run a scripted session and return the console transcript."""

    def _run(storage, *answers, **settings):
        console = make_console(*answers)
        menu = ConsoleMenu(
            ledger=ExpenseLedger(storage=storage),
            settings=AppSettings(**settings),
            read=console.read,
            write=console.write,
            today=lambda: today,
        )
        menu.run()
        assert menu.state is MenuState.EXIT
        return console

    return _run


class TestMenuBasics:
    """Tests for choice parsing and the loop itself."""

    def test_render_menu_lists_all_options(self):
        text = render_menu()
        assert "=== LedgerLite ===" in text
        for number, label in enumerate(
            ["Add Expense", "View All Expenses", "Search Expense",
             "Delete Expense", "Monthly Summary", "Exit"],
            start=1,
        ):
            assert f"{number}. {label}" in text

    @pytest.mark.parametrize("raw,expected", [
        ("1", MenuOption.ADD_EXPENSE),
        (" 6 ", MenuOption.EXIT),
        ("0", None),
        ("7", None),
        ("abc", None),
        ("", None),
        ("2.5", None),
    ])
    def test_parse_choice(self, raw, expected):
        assert parse_choice(raw) == expected

    def test_exit(self, run_session, memory_storage):
        console = run_session(memory_storage, "6")
        assert "Exiting program." in console.text
        assert console.prompts == ["Enter your choice (1-6): "]

    def test_invalid_choices_loop_back(self, run_session, memory_storage):
        console = run_session(memory_storage, "9", "abc", "6")
        assert console.text.count("[!] Invalid choice. Please try again.") == 2
        assert console.text.count("=== LedgerLite ===") == 3
        assert memory_storage.save_count == 0

    def test_end_of_input_exits(self, run_session, memory_storage):
        console = run_session(memory_storage)
        assert "End of input" in console.text


class TestAddOption:
    """Tests for the Add Expense option."""

    def test_add_with_blank_date_uses_today(self, run_session):
        storage = InMemoryExpenseStorage()
        console = run_session(storage, "1", "", "Lunch", "food", "12.50", "6")

        assert storage.load() == [
            Expense(date="2025-08-15", description="Lunch", category="food", amount=Decimal("12.50"))
        ]
        assert "[✓] Expense added successfully!" in console.text

    def test_invalid_entry_rejected_by_default(self, run_session):
        storage = InMemoryExpenseStorage()
        console = run_session(storage, "1", "2025-13-01", "Lunch", "groceries", "5", "6")

        assert storage.load() == []
        assert storage.save_count == 0
        assert "[!] Expense not saved." in console.text
        assert "groceries" in console.text

    def test_invalid_entry_saved_when_policy_allows(self, run_session):
        storage = InMemoryExpenseStorage()
        console = run_session(
            storage, "1", "2025-08-10", "", "groceries", "-5", "6",
            reject_invalid_entries=False,
        )

        saved = storage.load()
        assert len(saved) == 1
        assert saved[0].category == "groceries"
        assert saved[0].amount == Decimal("-5")
        assert "[!] The description is blank" in console.text
        assert "[✓] Expense added successfully!" in console.text

    def test_unparsable_amount_never_saved(self, run_session):
        storage = InMemoryExpenseStorage()
        run_session(
            storage, "1", "2025-08-10", "Lunch", "Food", "twelve", "6",
            reject_invalid_entries=False,
        )
        assert storage.load() == []

    def test_add_persists_to_file(self, run_session, tmp_path):
        storage = FlatFileExpenseStorage(tmp_path / "expense.txt")
        run_session(storage, "1", "2025-08-10", "Dinner, with friends", "Food", "30", "6")
        assert storage.load()[0].description == "Dinner, with friends"


class TestViewOption:
    """Tests for the View All Expenses option."""

    def test_view_empty(self, run_session):
        console = run_session(InMemoryExpenseStorage(), "2", "6")
        assert "You don't have any expenses yet" in console.text

    def test_view_table_sorted_ascending(self, run_session, memory_storage):
        console = run_session(memory_storage, "2", "6")
        text = console.text
        assert "Date" in text and "Description" in text and "Category" in text and "Amount" in text
        assert text.index("2025-07-02") < text.index("2025-08-01") < text.index("2025-08-10") < text.index("2025-09-01")
        assert "$12.50" in text

    def test_view_newest_first(self, run_session, memory_storage):
        console = run_session(memory_storage, "2", "6", newest_first=True)
        text = console.text
        assert text.index("2025-09-01") < text.index("2025-07-02")

    def test_currency_symbol(self, run_session, memory_storage):
        console = run_session(memory_storage, "2", "6", currency_symbol="€")
        assert "€12.50" in console.text


class TestSearchOption:
    """Tests for the Search Expense option."""

    def test_blank_search_aborts(self, run_session, memory_storage):
        console = run_session(memory_storage, "3", "", "6")
        assert "Input was blank" in console.text

    def test_invalid_category_aborts(self, run_session, memory_storage):
        console = run_session(memory_storage, "3", "groceries", "6")
        assert "[!] Invalid input." in console.text
        assert "sorted by date" not in console.text

    def test_search_matches(self, run_session, memory_storage):
        console = run_session(memory_storage, "3", "FOOD", "6")
        text = console.text
        assert "Category: FOOD (sorted by date)" in text
        assert "Lunch" in text
        assert "Bus pass" not in text

    def test_search_without_matches_prints_empty_table(self, run_session, memory_storage):
        console = run_session(memory_storage, "3", "Other", "6")
        assert "Category: Other (sorted by date)" in console.text
        assert "Amount" in console.text


class TestDeleteOption:
    """Tests for the Delete Expense option."""

    def test_delete_empty(self, run_session):
        console = run_session(InMemoryExpenseStorage(), "4", "6")
        assert "You don't have any expenses yet" in console.text

    def test_delete_first_listed(self, run_session, memory_storage):
        console = run_session(memory_storage, "4", "1", "6")
        assert "1. 2025-07-02 | Bus pass | Transport | $40.00" in console.text
        assert "Removed: 2025-07-02 | Bus pass | Transport | $40.00" in console.text
        assert [e.description for e in memory_storage.load()] == ["Electricity", "Lunch", "Cinema"]

    def test_delete_last_listed(self, run_session, memory_storage):
        run_session(memory_storage, "4", "4", "6")
        assert "Cinema" not in [e.description for e in memory_storage.load()]
        assert len(memory_storage.load()) == 3

    @pytest.mark.parametrize("answer", ["0", "5", "-1", "x", ""])
    def test_invalid_index_does_not_mutate(self, run_session, memory_storage, answer):
        console = run_session(memory_storage, "4", answer, "6")
        assert "[!] Invalid index." in console.text
        assert memory_storage.save_count == 0
        assert len(memory_storage.load()) == 4


class TestMonthlySummaryOption:
    """Tests for the Monthly Summary option."""

    def test_summary_empty_store(self, run_session):
        console = run_session(InMemoryExpenseStorage(), "5", "6")
        assert "You don't have any expenses yet" in console.text

    def test_summary_defaults_to_current_month(self, run_session, memory_storage):
        console = run_session(memory_storage, "5", "", "6")
        text = console.text
        assert "Summary for August 2025" in text
        assert text.index("Bills") < text.index("Food")
        assert "Total: $72.75" in text
        assert "Cinema" not in text

    def test_summary_for_given_month(self, run_session, memory_storage):
        console = run_session(memory_storage, "5", "2025-09", "6")
        assert "Summary for September 2025" in console.text
        assert "Total: $15.00" in console.text

    def test_summary_no_data(self, run_session, memory_storage):
        console = run_session(memory_storage, "5", "2024-01", "6")
        assert "No expenses found for January 2024" in console.text

    def test_summary_invalid_month(self, run_session, memory_storage):
        console = run_session(memory_storage, "5", "2025-8", "6")
        assert "[!] Invalid month." in console.text
