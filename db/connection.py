"""
db/connection.py
----------------
Opens and closes PostgreSQL connections for the repositories.

No pool: every repository call acquires its own
connection and releases it before returning. A pool must be introduced
before this layer is shared between concurrent callers.
"""

from contextlib import contextmanager
from typing import Callable, Iterator

import psycopg2

from config import DATABASE_URL
from errors import StoreConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)


class StorageGateway:
    """Hands out one short-lived connection per repository operation."""

    def __init__(self, dsn: str = DATABASE_URL, connect: Callable = psycopg2.connect):
        """
        Args:
            dsn: libpq connection string or URL.
            connect: Factory called as ``connect(dsn)``; ``psycopg2.connect`` by default.
        """
        self._dsn = dsn
        self._connect = connect

    def acquire(self):
        """
        Open a new connection to the store.

        Returns:
            A psycopg2 connection object.

        Raises:
            StoreConnectionError: If the database is unreachable or the credentials are rejected.
        """
        try:
            conn = self._connect(self._dsn)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to connect to database: {e}")
            raise StoreConnectionError(str(e)) from e
        logger.debug("Database connection opened.")
        return conn

    def release(self, conn) -> None:
        """
        Close a connection obtained from :meth:`acquire`.

        Args:
            conn: The psycopg2 connection to release.
        """
        conn.close()
        logger.debug("Database connection closed.")

    @staticmethod
    def rollback(conn) -> None:
        """Roll back the current transaction unless the connection already dropped."""
        if not conn.closed:
            conn.rollback()

    @contextmanager
    def connection(self) -> Iterator:
        """Acquire a connection for the duration of a ``with`` block."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)
