"""
Fixed-width text rendering for the console.

Every function returns a string; printing is left to the caller.
"""

from decimal import Decimal

from ledgerlite.models.expense import Expense, MonthlySummary


RULE = "-" * 62
ROW_FORMAT = "{date:<12} | {description:<15} | {category:<15} | {amount:>10}"


def format_amount(amount: Decimal, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{amount:.2f}"


def render_expense_table(expenses: list[Expense], currency_symbol: str = "$") -> str:
    """Date | Description | Category | Amount, one row per expense."""
    lines = [
        RULE,
        ROW_FORMAT.format(
            date="Date",
            description="Description",
            category="Category",
            amount="Amount",
        ),
        RULE,
    ]
    for expense in expenses:
        lines.append(ROW_FORMAT.format(
            date=expense.date,
            description=expense.description,
            category=expense.category,
            amount=format_amount(expense.amount, currency_symbol),
        ))
    lines.append(RULE)
    return "\n".join(lines)


def render_numbered_list(expenses: list[Expense], currency_symbol: str = "$") -> str:
    """1-based listing used by the delete prompt."""
    return "\n".join(
        f"{number}. {expense.describe(currency_symbol)}"
        for number, expense in enumerate(expenses, start=1)
    )


def render_summary(summary: MonthlySummary, currency_symbol: str = "$") -> str:
    lines = [
        f"\nSummary for {summary.label}",
        "-" * 39,
    ]
    for group in summary.totals:
        lines.append(f"{group.category:<13}: {format_amount(group.total, currency_symbol)}")
    lines.append("-" * 39)
    lines.append(f"Total: {format_amount(summary.grand_total, currency_symbol)}")
    return "\n".join(lines)


def render_warning(message: str) -> str:
    return f"=====\n[!] {message}\n====="
