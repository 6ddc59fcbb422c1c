"""
Expense Input Validation

Pure predicates over the text the user typed, plus a validator that
collects every problem into a ValidationResult.

The date rule is a pattern check only: 4-digit year, month 01-12,
day 01-31. There is no leap-year or month-length cross-check, so
2025-02-30 is accepted.

IMPORTANT: Validation NEVER silently fixes issues.
It reports them, and the caller decides whether to proceed.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ledgerlite.models.expense import (
    ExpenseCategory,
    ValidationIssue,
    ValidationResult,
)


DATE_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$", re.ASCII)
MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$", re.ASCII)


def valid_date(value: str) -> bool:
    return DATE_PATTERN.fullmatch(value) is not None


def valid_month(value: str) -> bool:
    return MONTH_PATTERN.fullmatch(value) is not None


def valid_category(value: str) -> bool:
    return ExpenseCategory.lookup(value) is not None


def parse_amount(value: str) -> Optional[Decimal]:
    """Parse text as a finite Decimal, or return None."""
    try:
        amount = Decimal(value.strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


def valid_amount(value: str) -> bool:
    amount = parse_amount(value)
    return amount is not None and amount > 0


class ExpenseValidator:
    """
    Validates the four Add inputs.

    Every check runs, so the user sees all problems at once
    rather than one per attempt.
    """

    def validate(
        self,
        date: str,
        description: str,
        category: str,
        amount: str,
    ) -> ValidationResult:
        issues = []

        if not description.strip():
            issues.append(self._missing("description"))

        if not category.strip():
            issues.append(self._missing("category"))
        elif not valid_category(category):
            allowed = "/".join(c.value for c in ExpenseCategory)
            issues.append(ValidationIssue(
                field="category",
                issue_type="invalid_value",
                message=f"Category '{category}' is not one of {allowed}",
                severity="error",
            ))

        if not valid_date(date):
            issues.append(ValidationIssue(
                field="date",
                issue_type="invalid_format",
                message=f"Date '{date}' is not a valid yyyy-mm-dd date",
                severity="error",
            ))

        if not amount.strip():
            issues.append(self._missing("amount"))
        else:
            parsed = parse_amount(amount)
            if parsed is None:
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="invalid_format",
                    message=f"Amount '{amount}' is not a number",
                    severity="error",
                ))
            elif parsed <= 0:
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="invalid_value",
                    message="Amount value can't be less than or equal to 0",
                    severity="error",
                ))

        return ValidationResult(issues=issues)

    @staticmethod
    def _missing(field: str) -> ValidationIssue:
        return ValidationIssue(
            field=field,
            issue_type="missing",
            message=f"The {field} is blank",
            severity="error",
        )
