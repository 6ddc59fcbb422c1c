"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The flat file is the real backend; the in-memory store backs tests.
"""

from ledgerlite.services.storage.interface import (
    ExpenseStorageInterface,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from ledgerlite.services.storage.flat_file import (
    EXPENSE_COLUMNS,
    FlatFileExpenseStorage,
    InMemoryExpenseStorage,
)

__all__ = [
    # Interface
    "ExpenseStorageInterface",
    # Exceptions
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Implementations
    "EXPENSE_COLUMNS",
    "FlatFileExpenseStorage",
    "InMemoryExpenseStorage",
]
