"""
Console entry point for LedgerLite.

    python -m ledgerlite
    ledgerlite

No command-line arguments are read. Configuration comes from
LEDGERLITE_* environment variables or a .env file.
"""

import sys
from typing import Optional

import structlog

from ledgerlite.audit import AuditLogger, configure_logging
from ledgerlite.config import get_settings
from ledgerlite.console import ConsoleMenu
from ledgerlite.ledger import ExpenseLedger
from ledgerlite.services.storage import (
    ExpenseStorageInterface,
    FlatFileExpenseStorage,
    StorageError,
)


def create_app_components(
    storage: Optional[ExpenseStorageInterface] = None,
) -> ConsoleMenu:
    """
    Factory function to wire the menu, ledger and storage together.

    Args:
        storage: Storage backend to use. Defaults to the configured
                 flat file.
    """
    settings = get_settings()
    audit_logger = AuditLogger()
    storage = storage or FlatFileExpenseStorage(
        path=settings.storage.data_file,
        encoding=settings.storage.file_encoding,
    )
    ledger = ExpenseLedger(storage=storage, audit_logger=audit_logger)
    return ConsoleMenu(
        ledger=ledger,
        settings=settings.app,
        audit_logger=audit_logger,
    )


def main() -> int:
    """Run the interactive menu. Returns the process exit code."""
    configure_logging(get_settings().logging)
    logger = structlog.get_logger("ledgerlite")

    menu = create_app_components()
    try:
        menu.run()
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting program.")
    except StorageError as e:
        logger.error("storage_failure", error=str(e))
        print(f"[!] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
