"""
store/ - Record Store
=====================
The capability interface the rest of the application talks to, its
PostgreSQL and in-memory implementations, and the factory that builds one.
"""

from store.base import RecordStore
from store.factory import create_record_store
from store.in_memory_store import InMemoryRecordStore
from store.postgres_store import PostgresRecordStore

__all__ = [
    "RecordStore",
    "PostgresRecordStore",
    "InMemoryRecordStore",
    "create_record_store",
]
