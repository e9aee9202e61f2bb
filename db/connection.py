"""
db/connection.py
----------------
Builds and tears down the PostgreSQL connection pool that backs the
record store. Uses psycopg2's ThreadedConnectionPool so a single pool
can be shared by concurrent request handlers.

The pool is returned to the caller rather than kept in module state;
whoever creates it owns it and passes it on.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.errors import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


def create_pool(
    dsn: Optional[str] = None,
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
) -> pool.ThreadedConnectionPool:
    """
    Create a database connection pool.

    Args:
        dsn: libpq connection string. Defaults to ``config.DATABASE_URL``.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        PersistenceError: If the database is unreachable.
    """
    try:
        db_pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
    except psycopg2.Error as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise PersistenceError("create_pool", str(e)) from e
    logger.info("Database connection pool initialized successfully.")
    return db_pool


@contextmanager
def borrowed_connection(db_pool) -> Iterator:
    """
    Borrow a connection for the duration of a ``with`` block and always
    hand it back to the pool afterwards.
    """
    conn = db_pool.getconn()
    try:
        yield conn
    finally:
        db_pool.putconn(conn)


def close_pool(db_pool) -> None:
    """Close all connections in the pool."""
    if db_pool is not None and not db_pool.closed:
        db_pool.closeall()
        logger.info("Database connection pool closed.")
