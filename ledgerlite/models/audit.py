"""
Audit Models for LedgerLite

Every change to the backing file, and every rejected input,
is recorded as an audit event. This provides:
1. Traceability of what was added and removed
2. Debugging information when things go wrong
3. A way to reconstruct history when the file is lost

DESIGN DECISION: Audit events are written to the log only.
The backing file holds expenses and nothing else.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Mutations
    EXPENSE_ADDED = "expense_added"
    EXPENSE_REJECTED = "expense_rejected"
    EXPENSE_DELETED = "expense_deleted"

    # Input problems
    VALIDATION_WARNING = "validation_warning"
    INVALID_MENU_CHOICE = "invalid_menu_choice"
    INVALID_INDEX = "invalid_index"

    # Storage
    RECORDS_LOADED = "records_loaded"
    RECORDS_SAVED = "records_saved"
    STORAGE_ERROR = "storage_error"

    # Queries
    SUMMARY_GENERATED = "summary_generated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Correlation - all events of one menu operation share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events of one menu operation"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(expense, correlation_id)
        audit_logger.log(event)
    """

    @staticmethod
    def _expense_details(expense) -> dict[str, Any]:
        return {
            "date": expense.date,
            "description": expense.description,
            "category": expense.category,
            "amount": str(expense.amount),
        }

    @staticmethod
    def expense_added(
        expense,
        correlation_id: Optional[UUID] = None,
        had_warnings: bool = False,
    ) -> AuditEvent:
        details = AuditEventBuilder._expense_details(expense)
        details["had_warnings"] = had_warnings
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            severity=AuditSeverity.WARNING if had_warnings else AuditSeverity.INFO,
            correlation_id=correlation_id,
            description=f"Expense added: {expense.category} {expense.amount}",
            details=details,
            is_user_action=True,
        )

    @staticmethod
    def expense_rejected(
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Expense rejected with {len(issues)} issue(s)",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def expense_deleted(
        expense,
        position: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        details = AuditEventBuilder._expense_details(expense)
        details["position"] = position
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            correlation_id=correlation_id,
            description=f"Expense deleted: {expense.date} {expense.category}",
            details=details,
            is_user_action=True,
        )

    @staticmethod
    def validation_warning(
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_WARNING,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Expense saved despite validation issues",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def invalid_menu_choice(raw_input: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_MENU_CHOICE,
            severity=AuditSeverity.DEBUG,
            description="Menu choice rejected",
            details={"input": raw_input},
            is_user_action=True,
        )

    @staticmethod
    def invalid_index(
        raw_input: str,
        available: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_INDEX,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description="Delete index rejected",
            details={"input": raw_input, "available": available},
            is_user_action=True,
        )

    @staticmethod
    def records_loaded(
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORDS_LOADED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Backing file loaded with {count} record(s)",
            details={"count": count},
        )

    @staticmethod
    def records_saved(
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORDS_SAVED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Backing file rewritten with {count} record(s)",
            details={"count": count},
        )

    @staticmethod
    def summary_generated(
        month: str,
        expense_count: int,
        grand_total: str,
        totals: Optional[dict[str, str]] = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SUMMARY_GENERATED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Monthly summary for {month}",
            details={
                "month": month,
                "expense_count": expense_count,
                "grand_total": grand_total,
                "totals": totals or {},
            },
            is_user_action=True,
        )

    @staticmethod
    def storage_error(
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description="Backing file could not be read or written",
            error_message=error_message,
        )
