"""Tests for building a record store from configuration."""

from unittest.mock import MagicMock, patch

import pytest

from store import InMemoryRecordStore, PostgresRecordStore, create_record_store


def test_inmemory_backend():
    assert isinstance(create_record_store("inmemory"), InMemoryRecordStore)


def test_backend_name_is_case_insensitive():
    assert isinstance(create_record_store("InMemory"), InMemoryRecordStore)


def test_postgres_backend_builds_pool_from_dsn():
    fake_pool = MagicMock(name="pool")
    with patch("store.factory.create_pool", return_value=fake_pool) as create_pool:
        store = create_record_store("postgres", dsn="postgresql://u:p@db:5432/food")

    create_pool.assert_called_once_with("postgresql://u:p@db:5432/food")
    assert isinstance(store, PostgresRecordStore)
    assert store.pool is fake_pool


def test_default_backend_comes_from_config():
    with patch("store.factory.STORE_BACKEND", "inmemory"):
        assert isinstance(create_record_store(), InMemoryRecordStore)


def test_unknown_backend_raises():
    with pytest.raises(ValueError, match="Unknown store backend"):
        create_record_store("sqlite")
