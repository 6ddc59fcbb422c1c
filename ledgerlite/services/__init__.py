"""
Services Package

Storage backends used by the ledger.
"""

from ledgerlite.services.storage import (
    ExpenseStorageInterface,
    FlatFileExpenseStorage,
    InMemoryExpenseStorage,
    StorageError,
)

__all__ = [
    "ExpenseStorageInterface",
    "FlatFileExpenseStorage",
    "InMemoryExpenseStorage",
    "StorageError",
]
