"""
Interactive Command Loop

This is the part of LedgerLite the user actually sees: a numbered
menu, prompts for each operation, and fixed-width tables.

The loop is a small state machine:

    MENU_DISPLAY → AWAITING_CHOICE → EXECUTING → MENU_DISPLAY
                                   ↘ (Exit)    → EXIT

An unparsable or out-of-range choice goes straight back to
MENU_DISPLAY without side effects. EXIT is reached only through the
Exit option, or when standard input runs out.

Input and output are injected callables so tests can script a session.
"""

from datetime import date
from enum import Enum, IntEnum
from typing import Callable, Optional

from ledgerlite.audit import AuditLogger, create_correlation_id
from ledgerlite.config import AppSettings, get_settings
from ledgerlite.console.tables import (
    render_expense_table,
    render_numbered_list,
    render_summary,
    render_warning,
)
from ledgerlite.ledger import ExpenseLedger, InvalidIndexError
from ledgerlite.models.expense import Expense, ExpenseCategory
from ledgerlite.queries import current_month, format_month_label
from ledgerlite.validation import (
    ExpenseValidator,
    parse_amount,
    valid_category,
    valid_month,
)


EMPTY_NOTICE = (
    "=======\n"
    "You don't have any expenses yet. Create one to see it listed here.\n"
    "======="
)
CATEGORY_CHOICES = "/".join(c.value for c in ExpenseCategory)


class MenuOption(IntEnum):
    """The closed set of menu operations, numbered as displayed."""
    ADD_EXPENSE = 1
    VIEW_EXPENSES = 2
    SEARCH_EXPENSES = 3
    DELETE_EXPENSE = 4
    MONTHLY_SUMMARY = 5
    EXIT = 6

    @property
    def label(self) -> str:
        return {
            MenuOption.ADD_EXPENSE: "Add Expense",
            MenuOption.VIEW_EXPENSES: "View All Expenses",
            MenuOption.SEARCH_EXPENSES: "Search Expense",
            MenuOption.DELETE_EXPENSE: "Delete Expense",
            MenuOption.MONTHLY_SUMMARY: "Monthly Summary",
            MenuOption.EXIT: "Exit",
        }[self]


class MenuState(str, Enum):
    MENU_DISPLAY = "menu_display"
    AWAITING_CHOICE = "awaiting_choice"
    EXECUTING = "executing"
    EXIT = "exit"


def render_menu() -> str:
    lines = ["", "=== LedgerLite ===", ""]
    lines.extend(f"{option.value}. {option.label}" for option in MenuOption)
    lines.append("-------------")
    return "\n".join(lines)


def parse_choice(raw: str) -> Optional[MenuOption]:
    """Menu option for the typed number, or None if it is not one."""
    try:
        number = int(raw.strip())
    except ValueError:
        return None
    try:
        return MenuOption(number)
    except ValueError:
        return None


class ConsoleMenu:
    """
    Runs the menu loop against an ExpenseLedger.
    """

    def __init__(
        self,
        ledger: ExpenseLedger,
        settings: Optional[AppSettings] = None,
        validator: Optional[ExpenseValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        today: Callable[[], date] = date.today,
    ):
        self._ledger = ledger
        self._settings = settings or get_settings().app
        self._validator = validator or ExpenseValidator()
        self._audit_logger = audit_logger or AuditLogger()
        self._read = read
        self._write = write
        self._today = today
        self.state = MenuState.MENU_DISPLAY

    @property
    def _currency(self) -> str:
        return self._settings.currency_symbol

    def run(self) -> None:
        """Loop until the user picks Exit or input ends."""
        choice: Optional[MenuOption] = None
        self.state = MenuState.MENU_DISPLAY

        try:
            while self.state is not MenuState.EXIT:
                if self.state is MenuState.MENU_DISPLAY:
                    self._write(render_menu())
                    self.state = MenuState.AWAITING_CHOICE

                elif self.state is MenuState.AWAITING_CHOICE:
                    raw = self._read(f"Enter your choice (1-{len(MenuOption)}): ")
                    choice = parse_choice(raw)
                    if choice is None:
                        self._write("[!] Invalid choice. Please try again.")
                        self._audit_logger.log_invalid_menu_choice(raw)
                        self.state = MenuState.MENU_DISPLAY
                    else:
                        self.state = MenuState.EXECUTING

                elif self.state is MenuState.EXECUTING:
                    self.state = self.dispatch(choice)
        except EOFError:
            self._write("\nEnd of input. Exiting program.")
            self.state = MenuState.EXIT

    def dispatch(self, option: MenuOption) -> MenuState:
        """Run one menu option and return the next state."""
        if option is MenuOption.ADD_EXPENSE:
            self.add_expense()
        elif option is MenuOption.VIEW_EXPENSES:
            self.view_expenses()
        elif option is MenuOption.SEARCH_EXPENSES:
            self.search_expenses()
        elif option is MenuOption.DELETE_EXPENSE:
            self.delete_expense()
        elif option is MenuOption.MONTHLY_SUMMARY:
            self.monthly_summary()
        elif option is MenuOption.EXIT:
            self._write("\nExiting program.")
            return MenuState.EXIT
        return MenuState.MENU_DISPLAY

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def add_expense(self) -> None:
        """
        Prompt for the four fields, validate, then save.

        Blank date means today. With reject_invalid_entries off, problems
        are printed and the expense is saved anyway; an amount that is not
        a number can never be saved.
        """
        correlation_id = create_correlation_id()

        date_text = self._read(
            "Enter date (yyyy-mm-dd) or leave blank to use today's date: "
        ).strip()
        description = self._read("Enter description: ").strip()
        category = self._read(f"Enter category [{CATEGORY_CHOICES}]: ").strip()
        amount_text = self._read("Enter amount: ").strip()

        if not date_text:
            date_text = self._today().isoformat()

        result = self._validator.validate(date_text, description, category, amount_text)
        for message in result.warnings:
            self._write(render_warning(message))

        amount = parse_amount(amount_text)
        issues = [issue.model_dump() for issue in result.issues]
        if amount is None or (result.has_errors and self._settings.reject_invalid_entries):
            self._write("[!] Expense not saved.")
            self._audit_logger.log_expense_rejected(issues, correlation_id)
            return

        expense = Expense(
            date=date_text,
            description=description,
            category=category,
            amount=amount,
        )
        self._ledger.add_expense(
            expense,
            correlation_id=correlation_id,
            had_warnings=result.has_errors,
        )
        if result.has_errors:
            self._audit_logger.log_validation_warning(issues, correlation_id)
        self._write("[✓] Expense added successfully!")

    def view_expenses(self) -> None:
        expenses = self._ledger.list_expenses(newest_first=self._settings.newest_first)
        if not expenses:
            self._write(EMPTY_NOTICE)
            return
        self._write(render_expense_table(expenses, self._currency))

    def search_expenses(self) -> None:
        category = self._read(
            f"Enter category to search by [{CATEGORY_CHOICES}]: "
        ).strip()

        if not category:
            self._write(render_warning("Input was blank, exiting."))
            return
        if not valid_category(category):
            self._write(render_warning("Invalid input."))
            return

        matches = self._ledger.search_by_category(
            category,
            newest_first=self._settings.newest_first,
        )
        self._write(f"Category: {category} (sorted by date)")
        self._write(render_expense_table(matches, self._currency))

    def delete_expense(self) -> None:
        """List expenses 1-based in ascending date order and remove one."""
        correlation_id = create_correlation_id()

        expenses = self._ledger.list_expenses(correlation_id=correlation_id)
        if not expenses:
            self._write(EMPTY_NOTICE)
            return

        self._write(render_numbered_list(expenses, self._currency))
        raw = self._read("Enter the index of the expense you want to remove: ").strip()

        try:
            number = int(raw)
        except ValueError:
            number = 0

        if not 1 <= number <= len(expenses):
            self._write("[!] Invalid index.")
            self._audit_logger.log_invalid_index(raw, len(expenses), correlation_id)
            return

        try:
            removed = self._ledger.delete_at(number - 1, correlation_id=correlation_id)
        except InvalidIndexError:
            self._write("[!] Invalid index.")
            return

        self._write(f"Removed: {removed.describe(self._currency)}")

    def monthly_summary(self) -> None:
        correlation_id = create_correlation_id()

        if self._ledger.is_empty(correlation_id=correlation_id):
            self._write(EMPTY_NOTICE)
            return

        month = self._read(
            "Enter month (yyyy-mm) or press Enter to use current month: "
        ).strip()
        if not month:
            month = current_month(self._today())

        if not valid_month(month):
            self._write("[!] Invalid month.")
            return

        summary = self._ledger.monthly_summary(month, correlation_id=correlation_id)
        if summary is None:
            self._write(f"No expenses found for {format_month_label(month)}")
            return
        self._write(render_summary(summary, self._currency))
