"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import sys

import psycopg2

from db.connection import StorageGateway
from errors import GalleryError, StoreError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: registered accounts (username is not unique)
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    username        TEXT NOT NULL,
    password        TEXT NOT NULL
);

-- Images table: uploaded image payloads with their metadata
CREATE TABLE IF NOT EXISTS images (
    id              SERIAL PRIMARY KEY,
    user_id         INTEGER NOT NULL,
    image_name      TEXT NOT NULL,
    image_data      BYTEA NOT NULL,
    description     TEXT,
    upload_date     TIMESTAMPTZ DEFAULT NOW()
);

-- Index for credential lookups
CREATE INDEX IF NOT EXISTS idx_users_username ON users(username);
"""


def create_tables(gateway: StorageGateway) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = gateway.acquire()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        gateway.rollback(conn)
        logger.error(f"Failed to initialize schema: {e}")
        raise StoreError(f"Failed to initialize schema: {e}") from e
    finally:
        gateway.release(conn)


def main() -> int:
    """Create the schema against the configured database."""
    try:
        create_tables(StorageGateway())
    except GalleryError as e:
        print(f"Could not initialize the database: {e}")
        return 1
    print("Database schema created successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
