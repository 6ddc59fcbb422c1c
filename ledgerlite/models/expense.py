"""
Core Data Models for LedgerLite

These models define the schemas for all data flowing through the system.
They are designed to:
1. Give the flat-file record a typed shape
2. Carry validation findings back to the console
3. Describe aggregation results without leaking dict plumbing

DESIGN DECISION: The Expense model is deliberately loose (text date,
text category). The entry rules live in the validator, because a record
saved under the warn-and-proceed policy must still load back.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class ExpenseCategory(str, Enum):
    """
    Supported expense categories.

    Matching is case-insensitive; the value is the display form.
    """
    FOOD = "Food"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    BILLS = "Bills"
    OTHER = "Other"

    @classmethod
    def lookup(cls, value: str) -> Optional["ExpenseCategory"]:
        """Find a category by case-insensitive name, or None."""
        needle = value.strip().lower()
        for category in cls:
            if category.value.lower() == needle:
                return category
        return None


# =============================================================================
# CORE EXPENSE MODEL
# =============================================================================

class Expense(BaseModel):
    """
    A single expense record, one line of the backing file.

    Records have no persistent identifier. Identity for deletion is the
    position in a freshly loaded, date-sorted list.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    date: str = Field(
        ...,
        description="Expense date as YYYY-MM-DD text"
    )
    description: str = Field(
        default="",
        description="Free-form description"
    )
    category: str = Field(
        ...,
        description="Category as entered by the user"
    )
    amount: Decimal = Field(
        ...,
        description="Amount spent"
    )

    @field_validator('amount')
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        """NaN and Infinity parse as Decimal but are not amounts."""
        if not v.is_finite():
            raise ValueError(f"Amount must be a finite number, got {v}")
        return v

    @property
    def month(self) -> str:
        """The YYYY-MM prefix of the date."""
        return self.date[:7]

    def describe(self, currency_symbol: str = "$") -> str:
        """One-line form used by the delete listing."""
        return (
            f"{self.date} | {self.description} | {self.category} | "
            f"{currency_symbol}{self.amount:.2f}"
        )


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'invalid_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """Result of validating the four Add inputs."""

    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warnings(self) -> list[str]:
        """Messages of every issue, in the order they were found."""
        return [issue.message for issue in self.issues]


# =============================================================================
# AGGREGATION MODELS
# =============================================================================

class CategoryTotal(BaseModel):
    """Sum of the expenses in one category."""

    category: str
    total: Decimal = Field(default=Decimal("0"))
    count: int = Field(default=0, ge=0)


class CategorySummary(BaseModel):
    """
    Per-category totals, ordered by descending total,
    plus the grand total of every input record.
    """

    totals: list[CategoryTotal] = Field(default_factory=list)
    grand_total: Decimal = Field(default=Decimal("0"))

    def as_dict(self) -> dict[str, Decimal]:
        return {group.category: group.total for group in self.totals}


class MonthlySummary(BaseModel):
    """Category breakdown for one YYYY-MM month."""

    month: str = Field(
        ...,
        pattern=r"^\d{4}-(0[1-9]|1[0-2])$",
        description="Month as YYYY-MM"
    )
    label: str = Field(
        ...,
        description="Display form, e.g. 'August 2025'"
    )
    totals: list[CategoryTotal] = Field(default_factory=list)
    grand_total: Decimal = Field(default=Decimal("0"))
    expense_count: int = Field(default=0, ge=0)
