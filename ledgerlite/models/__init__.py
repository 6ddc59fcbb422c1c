"""
Data Models Package

This package contains all Pydantic models used in LedgerLite.
"""

from ledgerlite.models.expense import (
    CategorySummary,
    CategoryTotal,
    Expense,
    ExpenseCategory,
    MonthlySummary,
    ValidationIssue,
    ValidationResult,
)
from ledgerlite.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "CategorySummary",
    "CategoryTotal",
    "Expense",
    "ExpenseCategory",
    "MonthlySummary",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
