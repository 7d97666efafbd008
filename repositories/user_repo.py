"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

import psycopg2

from db.connection import StorageGateway
from errors import StoreError
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for operations on the users table."""

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    def add(self, user: User) -> User:
        """
        Insert a new user record. Duplicate usernames are accepted.

        Args:
            user: The User to persist.

        Returns:
            The same User with its `id` populated.

        Raises:
            StoreConnectionError: If the database is unreachable.
            StoreError: If the insert fails.
        """
        sql = """
            INSERT INTO users (username, password)
            VALUES (%s, %s)
            RETURNING id;
        """
        conn = self.gateway.acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user.username, user.password))
                user.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Registered user #{user.id} ({user.username})")
            return user
        except psycopg2.Error as e:
            self.gateway.rollback(conn)
            logger.error(f"Failed to register user {user.username!r}: {e}")
            raise StoreError(f"Failed to register user: {e}") from e
        finally:
            self.gateway.release(conn)

    def find_by_username(self, username: str) -> list[User]:
        """
        Fetch every user whose username matches exactly.

        Returns:
            List of User objects in insertion order (may be empty).
        """
        sql = "SELECT id, username, password FROM users WHERE username = %s ORDER BY id;"
        conn = self.gateway.acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (username,))
                return [User(id=r[0], username=r[1], password=r[2]) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to look up user {username!r}: {e}")
            raise StoreError(f"Failed to look up user: {e}") from e
        finally:
            self.gateway.release(conn)
