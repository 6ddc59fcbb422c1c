"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Point the ledger at any file path
2. Use in-memory storage for testing
3. Keep business logic decoupled from the file format

The interface is intentionally tiny. Every operation loads the whole
list and every mutation rewrites the whole list; there is no
append, update or delete at this level.

LIMITATION: Nothing here locks the file. Two processes working on
the same backing file can lose each other's changes.
"""

from abc import ABC, abstractmethod

from ledgerlite.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage operations.
    """

    @abstractmethod
    def load(self) -> list[Expense]:
        """
        Load every stored expense.

        Returns:
            All records in stored order. Empty if nothing is stored yet.

        Raises:
            StorageError: If the store exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, expenses: list[Expense]) -> None:
        """
        Replace the stored contents with the given list.

        Args:
            expenses: The complete list of records to keep

        Raises:
            StorageError: If the store cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """The backing store exists but could not be read."""
    pass


class StorageWriteError(StorageError):
    """The backing store could not be written."""
    pass
