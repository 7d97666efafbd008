# tests/test_connection.py
"""
Unit tests for StorageGateway: connection-per-call and error mapping.
"""

from unittest.mock import MagicMock

import psycopg2
import pytest

from db.connection import StorageGateway
from db.init_db import create_tables
from errors import StoreConnectionError, StoreError


def test_acquire_passes_dsn_to_connect():
    connect = MagicMock()
    gateway = StorageGateway(dsn="postgresql://u:p@h:1/db", connect=connect)

    conn = gateway.acquire()

    connect.assert_called_once_with("postgresql://u:p@h:1/db")
    assert conn is connect.return_value


def test_acquire_maps_operational_error():
    connect = MagicMock(side_effect=psycopg2.OperationalError("could not connect to server"))
    gateway = StorageGateway(dsn="x", connect=connect)

    with pytest.raises(StoreConnectionError) as excinfo:
        gateway.acquire()

    assert isinstance(excinfo.value, ConnectionError)
    assert isinstance(excinfo.value.__cause__, psycopg2.OperationalError)


def test_connection_context_releases_on_error():
    conn = MagicMock()
    gateway = StorageGateway(dsn="x", connect=lambda dsn: conn)

    with pytest.raises(RuntimeError):
        with gateway.connection():
            raise RuntimeError("boom")

    conn.close.assert_called_once()


def test_rollback_skipped_on_closed_connection():
    conn = MagicMock()
    conn.closed = 2
    StorageGateway.rollback(conn)
    conn.rollback.assert_not_called()

    conn.closed = 0
    StorageGateway.rollback(conn)
    conn.rollback.assert_called_once()


def test_each_operation_opens_and_closes_its_own_connection(
    sqlite_connect, account_service, image_service, sample_image
):
    account_service.register("alice", "pw1")
    account_service.authenticate("alice", "pw1")
    image_service.upload(1, str(sample_image), "test")
    image_service.list_all()

    assert len(sqlite_connect.opened) == 4
    assert len({id(c) for c in sqlite_connect.opened}) == 4
    assert all(c.closed for c in sqlite_connect.opened)


def test_create_tables_wraps_driver_error():
    conn = MagicMock()
    conn.closed = 0
    conn.cursor.return_value.__enter__.return_value.execute.side_effect = (
        psycopg2.ProgrammingError("permission denied for schema public")
    )
    gateway = StorageGateway(dsn="x", connect=lambda dsn: conn)

    with pytest.raises(StoreError):
        create_tables(gateway)

    conn.rollback.assert_called_once()
    conn.close.assert_called_once()


def test_init_db_main_reports_unreachable_store(monkeypatch, capsys):
    from db import init_db

    refused = MagicMock(side_effect=psycopg2.OperationalError("connection refused"))
    monkeypatch.setattr(init_db, "StorageGateway", lambda: StorageGateway(dsn="x", connect=refused))

    assert init_db.main() == 1
    assert "Could not initialize the database" in capsys.readouterr().out
