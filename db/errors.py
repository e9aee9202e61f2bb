"""
db/errors.py
------------
Exceptions raised by the storage layer.

Every failure coming out of the database (rejected statement, lost
connection, exhausted pool, undecodable row) surfaces as a
PersistenceError. The driver exception is chained as ``__cause__``.
"""

from typing import Optional


class PersistenceError(Exception):
    """Raised when the backing database cannot complete an operation.

    Attributes:
        operation: name of the store operation that failed (e.g. ``create_order``)
        message: human-readable description of the failure
    """

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message or "database operation failed"
        super().__init__(f"{operation}: {self.message}")


class RowDecodeError(PersistenceError):
    """Raised when a returned row does not match the expected record shape."""

    def __init__(self, operation: str, row, reason: str):
        self.row = row
        super().__init__(operation, f"cannot decode row {row!r}: {reason}")
