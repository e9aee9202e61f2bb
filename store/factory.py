"""
store/factory.py
----------------
Builds the record store selected by configuration.

Backends (``STORE_BACKEND``):
    - "postgres": PostgresRecordStore over a new connection pool (default)
    - "inmemory": InMemoryRecordStore, for tests and local runs

The caller owns the returned store and hands it to whatever needs it;
nothing is kept at module level.
"""

from typing import Optional

from config import STORE_BACKEND
from db.connection import create_pool
from store.base import RecordStore
from store.in_memory_store import InMemoryRecordStore
from store.postgres_store import PostgresRecordStore
from utils.logger import get_logger

logger = get_logger(__name__)

BACKENDS = ("postgres", "inmemory")


def create_record_store(backend: Optional[str] = None, dsn: Optional[str] = None) -> RecordStore:
    """
    Create a record store.

    Args:
        backend: "postgres" or "inmemory". Defaults to ``config.STORE_BACKEND``.
        dsn: Connection string for the postgres backend. Defaults to
            ``config.DATABASE_URL``.

    Raises:
        ValueError: If the backend name is unknown.
        PersistenceError: If the postgres pool cannot connect.
    """
    mode = (backend or STORE_BACKEND).lower()

    if mode == "inmemory":
        logger.info("Using in-memory record store")
        return InMemoryRecordStore()

    if mode == "postgres":
        logger.info("Using PostgreSQL record store")
        return PostgresRecordStore(create_pool(dsn))

    raise ValueError(f"Unknown store backend '{mode}', expected one of {BACKENDS}")
