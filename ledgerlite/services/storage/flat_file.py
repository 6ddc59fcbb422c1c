"""
Flat File Storage Implementation

One expense per line, fields in the order date,description,category,amount.
No header line.

DESIGN DECISION: Lines are written with the csv module using minimal
quoting. A description without commas or quotes is written exactly as
the naive comma-joined form, so older files still load. A description
that does contain a comma gets quoted instead of corrupting the line.

TRADEOFFS:
- The whole file is rewritten on every save (fine for personal use)
- No atomic replace: a crash mid-write can truncate the file
- Malformed lines are dropped on load without telling the user
"""

import csv
import io
from pathlib import Path
from typing import Iterator, Optional, Union

import structlog
from pydantic import ValidationError

from ledgerlite.config import get_settings
from ledgerlite.models.expense import Expense
from ledgerlite.services.storage.interface import (
    ExpenseStorageInterface,
    StorageReadError,
    StorageWriteError,
)
from ledgerlite.validation import parse_amount


# Field order within a line
EXPENSE_COLUMNS = [
    "date",
    "description",
    "category",
    "amount",
]


logger = structlog.get_logger(__name__)


class FlatFileExpenseStorage(ExpenseStorageInterface):
    """
    Flat-file implementation of expense storage.

    The file is opened and closed inside each call; nothing is
    held open between menu operations.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        encoding: Optional[str] = None,
    ):
        settings = get_settings().storage
        self._path = Path(path) if path is not None else settings.data_file
        self._encoding = encoding or settings.file_encoding

    @property
    def path(self) -> Path:
        return self._path

    def _expense_to_row(self, expense: Expense) -> list[str]:
        """Convert an Expense to the list of line fields."""
        return [
            expense.date,
            expense.description,
            expense.category,
            str(expense.amount),
        ]

    def _row_to_expense(self, row: list[str]) -> Optional[Expense]:
        """
        Convert line fields to an Expense.

        Returns None for anything that is not exactly four fields
        with a parseable amount.
        """
        if len(row) != len(EXPENSE_COLUMNS):
            return None

        date, description, category, raw_amount = (field.strip() for field in row)
        amount = parse_amount(raw_amount)
        if amount is None:
            return None

        try:
            return Expense(
                date=date,
                description=description,
                category=category,
                amount=amount,
            )
        except ValidationError:
            return None

    def _read_rows(self, handle) -> Iterator[tuple[int, Optional[list[str]]]]:
        """
        Yield (line_number, row) for each record in the file.

        The row is None when the csv module cannot parse the record.
        Only \\n, \\r and \\r\\n end a record; form feeds and Unicode line
        separators stay inside the field.
        """
        reader = csv.reader(handle)
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error:
                yield reader.line_num, None
                continue
            yield reader.line_num, row

    def load(self) -> list[Expense]:
        """Load every well-formed line of the backing file."""
        if not self._path.exists():
            return []

        expenses = []
        skipped = 0
        try:
            with self._path.open("r", encoding=self._encoding, newline="") as handle:
                for line_number, row in self._read_rows(handle):
                    if row is not None and not "".join(row).strip():
                        continue

                    expense = self._row_to_expense(row) if row is not None else None
                    if expense is None:
                        skipped += 1
                        logger.debug(
                            "malformed_line_skipped",
                            path=str(self._path),
                            line_number=line_number,
                        )
                        continue
                    expenses.append(expense)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Failed to read {self._path}: {e}")

        logger.debug(
            "backing_file_read",
            path=str(self._path),
            count=len(expenses),
            skipped=skipped,
        )
        return expenses

    def save(self, expenses: list[Expense]) -> None:
        """Overwrite the backing file with the given records."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for expense in expenses:
            writer.writerow(self._expense_to_row(expense))

        try:
            with self._path.open("w", encoding=self._encoding, newline="") as handle:
                handle.write(buffer.getvalue())
        except OSError as e:
            raise StorageWriteError(f"Failed to write {self._path}: {e}")


class InMemoryExpenseStorage(ExpenseStorageInterface):
    """
    List-backed storage for tests.

    Hands out copies so callers cannot mutate the stored list
    without going through save().
    """

    def __init__(self, expenses: Optional[list[Expense]] = None):
        self._expenses = list(expenses or [])
        self.save_count = 0

    def load(self) -> list[Expense]:
        return list(self._expenses)

    def save(self, expenses: list[Expense]) -> None:
        self._expenses = list(expenses)
        self.save_count += 1
