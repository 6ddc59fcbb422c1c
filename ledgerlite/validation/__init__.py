"""Input validation package."""

from ledgerlite.validation.validator import (
    ExpenseValidator,
    parse_amount,
    valid_amount,
    valid_category,
    valid_date,
    valid_month,
)

__all__ = [
    "ExpenseValidator",
    "parse_amount",
    "valid_amount",
    "valid_category",
    "valid_date",
    "valid_month",
]
