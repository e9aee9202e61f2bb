"""
repositories/base.py
--------------------
Shared plumbing for the table repositories: borrowing a pooled connection,
running a single statement, commit/rollback, and translating driver errors
into PersistenceError. Also holds the small value coercions used by the
row-to-record mapping functions.
"""

from decimal import Decimal
from typing import Any, Callable, Optional, Sequence, TypeVar

import psycopg2

from db.connection import borrowed_connection
from db.errors import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)

RecordType = TypeVar("RecordType")


class BaseRepository:
    """
    Base class for repositories backed by a psycopg2 connection pool.
    Every public method of a subclass issues exactly one statement.
    """

    def __init__(self, db_pool):
        self.pool = db_pool

    def _execute(
        self,
        operation: str,
        sql: str,
        params: Sequence[Any] = (),
        decode: Optional[Callable[[Optional[tuple]], RecordType]] = None,
    ) -> Optional[RecordType]:
        """
        Run a write statement in its own transaction.

        Args:
            operation: Store operation name, used in logs and errors.
            sql: Parameterized SQL using ``%s`` placeholders.
            params: Positional parameters for the statement.
            decode: Maps the first result row (for ``RETURNING``). It runs
                before the commit, so a row it rejects rolls the write back.

        Returns:
            The decoded row when ``decode`` is given, otherwise None.

        Raises:
            PersistenceError: If the statement is rejected or the pool/connection fails.
            RowDecodeError: If ``decode`` rejects the returned row.
        """
        result = None
        try:
            with borrowed_connection(self.pool) as conn:
                try:
                    with conn.cursor() as cur:
                        cur.execute(sql, params)
                        if decode is not None:
                            result = decode(cur.fetchone())
                    conn.commit()
                except (psycopg2.Error, PersistenceError):
                    conn.rollback()
                    raise
        except psycopg2.Error as e:
            logger.error(f"{operation} failed: {e}")
            raise PersistenceError(operation, str(e)) from e
        return result

    def _fetch_all(
        self, operation: str, sql: str, decode: Callable[[tuple], RecordType]
    ) -> list[RecordType]:
        """
        Run a read query and map every row through ``decode``.

        A single undecodable row aborts the whole read; nothing partial is returned.

        Raises:
            PersistenceError: If the query fails.
            RowDecodeError: If a row does not match the record shape.
        """
        try:
            with borrowed_connection(self.pool) as conn:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    rows = cur.fetchall()
        except psycopg2.Error as e:
            logger.error(f"{operation} failed: {e}")
            raise PersistenceError(operation, str(e)) from e

        records = [decode(r) for r in rows]
        logger.debug(f"{operation} returned {len(records)} row(s)")
        return records


# ── Column coercions ──────────────────────────────────────
# Each raises TypeError/ValueError on a mismatch; callers wrap that
# into RowDecodeError.

def as_text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return value


def as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def as_integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise ValueError(f"expected an integer, got {value}")
    if value != int(value):
        raise ValueError(f"expected an integer, got {value}")
    return int(value)
