"""
Shared fixtures.

Repositories talk to the store through psycopg2's DB-API surface
(``conn.cursor()`` as a context manager, ``%s`` placeholders). The
adapter below exposes that surface over an on-disk SQLite file so the
real SQL runs without a PostgreSQL server. Each ``acquire`` opens a new
SQLite connection, matching the connection-per-call behaviour.
"""

import sqlite3

import pytest

from db.connection import StorageGateway
from repositories.image_repo import ImageRepository
from repositories.user_repo import UserRepository
from services.account_service import AccountService
from services.image_service import ImageService

SQLITE_SCHEMA = """
CREATE TABLE users (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    username    TEXT NOT NULL,
    password    TEXT NOT NULL
);

CREATE TABLE images (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id     INTEGER NOT NULL,
    image_name  TEXT NOT NULL,
    image_data  BLOB NOT NULL,
    description TEXT,
    upload_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class _SQLiteCursor:
    def __init__(self, cursor: sqlite3.Cursor):
        self._cursor = cursor
        self._rows: list = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._cursor.close()
        return False

    def execute(self, sql, params=()):
        self._cursor.execute(sql.replace("%s", "?"), params)
        # Drain eagerly so INSERT ... RETURNING is finished before commit.
        self._rows = self._cursor.fetchall()

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows


class SQLiteConnection:
    """Minimal psycopg2-shaped connection over sqlite3."""

    def __init__(self, path: str):
        self._conn = sqlite3.connect(path)
        self.closed = 0

    def cursor(self):
        return _SQLiteCursor(self._conn.cursor())

    def commit(self):
        self._conn.commit()

    def rollback(self):
        self._conn.rollback()

    def close(self):
        self._conn.close()
        self.closed = 1


class CountingConnect:
    """``connect`` factory that records every connection it opens."""

    def __init__(self, path: str):
        self.path = path
        self.opened: list[SQLiteConnection] = []

    def __call__(self, dsn):
        conn = SQLiteConnection(self.path)
        self.opened.append(conn)
        return conn


@pytest.fixture
def sqlite_connect(tmp_path):
    path = tmp_path / "gallery.db"
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SQLITE_SCHEMA)
        conn.commit()
    finally:
        conn.close()
    return CountingConnect(str(path))


@pytest.fixture
def gateway(sqlite_connect):
    return StorageGateway(dsn="sqlite-test", connect=sqlite_connect)


@pytest.fixture
def account_service(gateway):
    return AccountService(UserRepository(gateway))


@pytest.fixture
def image_service(gateway):
    return ImageService(ImageRepository(gateway))


@pytest.fixture
def sample_image(tmp_path):
    """A 10-byte file containing 0x00..0x09."""
    path = tmp_path / "a.png"
    path.write_bytes(bytes(range(10)))
    return path
