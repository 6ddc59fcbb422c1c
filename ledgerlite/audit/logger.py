"""
Audit Logger

DESIGN DECISION: Every change to the backing file is logged.
This provides:
1. Traceability of what was added and removed
2. Debugging capability
3. A record of rejected input

The audit logger:
- Writes structured JSON through structlog
- Never raises (a logging failure must not lose the user's expense)
- Supports correlation IDs to tie the events of one menu operation
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from ledgerlite.config import LoggingSettings
from ledgerlite.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(settings: LoggingSettings) -> None:
    """
    Point the stdlib root logger at stderr or the configured log file.

    structlog renders the JSON; stdlib only decides level and destination.
    """
    if settings.log_file is not None:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.log_level)


class AuditLogger:
    """
    Central audit logging service.

    Logs events to the structured local log only.
    """

    def __init__(self, logger=None):
        self._logger = logger or structlog.get_logger("ledgerlite.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if the log write itself failed.
        """
        log_dict = event.to_log_dict()

        try:
            if event.severity.value == "error":
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif event.severity.value == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except (OSError, ValueError):
            return False

        return True

    def log_expense_added(
        self,
        expense,
        correlation_id: Optional[UUID] = None,
        had_warnings: bool = False,
    ) -> None:
        """Log a saved expense."""
        self.log(AuditEventBuilder.expense_added(
            expense=expense,
            correlation_id=correlation_id,
            had_warnings=had_warnings,
        ))

    def log_expense_rejected(
        self,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an Add that failed validation and was not saved."""
        self.log(AuditEventBuilder.expense_rejected(
            issues=issues,
            correlation_id=correlation_id,
        ))

    def log_validation_warning(
        self,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an Add that failed validation but was saved anyway."""
        self.log(AuditEventBuilder.validation_warning(
            issues=issues,
            correlation_id=correlation_id,
        ))

    def log_expense_deleted(
        self,
        expense,
        position: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a removed expense."""
        self.log(AuditEventBuilder.expense_deleted(
            expense=expense,
            position=position,
            correlation_id=correlation_id,
        ))

    def log_records_loaded(
        self,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.records_loaded(
            count=count,
            correlation_id=correlation_id,
        ))

    def log_records_saved(
        self,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.records_saved(
            count=count,
            correlation_id=correlation_id,
        ))

    def log_invalid_menu_choice(self, raw_input: str) -> None:
        self.log(AuditEventBuilder.invalid_menu_choice(raw_input))

    def log_invalid_index(
        self,
        raw_input: str,
        available: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.invalid_index(
            raw_input=raw_input,
            available=available,
            correlation_id=correlation_id,
        ))

    def log_summary_generated(
        self,
        month: str,
        expense_count: int,
        grand_total: str,
        totals: Optional[dict[str, str]] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.summary_generated(
            month=month,
            expense_count=expense_count,
            grand_total=grand_total,
            totals=totals,
            correlation_id=correlation_id,
        ))

    def log_storage_error(
        self,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a read or write failure on the backing file."""
        self.log(AuditEventBuilder.storage_error(
            error_message=error_message,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a menu operation.
    Pass it through all subsequent calls.
    """
    return uuid4()
