"""
Pytest configuration and shared fixtures.
Puts the project root on sys.path and provides mock psycopg2 pools so the
repositories can be exercised without a running PostgreSQL server.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path so we can import db, models, repositories, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def cursor():
    """Mock cursor; tests set fetchone/fetchall return values or side effects."""
    cur = MagicMock(name="cursor")
    cur.fetchall.return_value = []
    cur.fetchone.return_value = None
    return cur


@pytest.fixture
def connection(cursor):
    conn = MagicMock(name="connection")
    conn.cursor.return_value.__enter__.return_value = cursor
    conn.cursor.return_value.__exit__.return_value = False
    return conn


@pytest.fixture
def db_pool(connection):
    """Mock ThreadedConnectionPool handing out a single mock connection."""
    pool = MagicMock(name="pool")
    pool.closed = False
    pool.getconn.return_value = connection
    return pool
