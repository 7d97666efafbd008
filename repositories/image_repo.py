"""
repositories/image_repo.py
---------------------------
Data access layer for uploaded images.
All SQL queries related to the `images` table live here.
"""

from typing import Optional

import psycopg2

from db.connection import StorageGateway
from errors import StoreError
from models.image import Image, ImageInfo
from utils.logger import get_logger

logger = get_logger(__name__)


class ImageRepository:
    """Repository for operations on the images table."""

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    # ── CREATE ────────────────────────────────────────────

    def add(self, image: Image) -> Image:
        """
        Insert an image row with its binary payload.

        Args:
            image: The Image to persist; `data` must already hold the file bytes.

        Returns:
            The same Image with its `id` and `upload_date` populated.
        """
        sql = """
            INSERT INTO images (user_id, image_name, image_data, description)
            VALUES (%s, %s, %s, %s)
            RETURNING id, upload_date;
        """
        conn = self.gateway.acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (image.user_id, image.name, image.data, image.description))
                row = cur.fetchone()
                image.id = row[0]
                image.upload_date = row[1]
            conn.commit()
            logger.info(
                f"Stored image #{image.id} ({len(image.data)} bytes) for user {image.user_id}"
            )
            return image
        except psycopg2.Error as e:
            self.gateway.rollback(conn)
            logger.error(f"Failed to store image {image.name!r}: {e}")
            raise StoreError(f"Failed to store image: {e}") from e
        finally:
            self.gateway.release(conn)

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[ImageInfo]:
        """
        Fetch metadata for every stored image.

        The payload column is not selected. Rows come back in the
        database's scan order.
        """
        sql = "SELECT id, image_name, description, upload_date FROM images;"
        conn = self.gateway.acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_info(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list images: {e}")
            raise StoreError(f"Failed to list images: {e}") from e
        finally:
            self.gateway.release(conn)

    def get_data(self, image_id: int) -> Optional[bytes]:
        """
        Fetch the binary payload of one image.

        Args:
            image_id: Primary key.

        Returns:
            The stored bytes, or None if no row has this id.
        """
        sql = "SELECT image_data FROM images WHERE id = %s;"
        conn = self.gateway.acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (image_id,))
                row = cur.fetchone()
                # psycopg2 returns bytea as memoryview
                return bytes(row[0]) if row else None
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch image #{image_id}: {e}")
            raise StoreError(f"Failed to fetch image: {e}") from e
        finally:
            self.gateway.release(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_info(row: tuple) -> ImageInfo:
        """Convert a metadata row tuple to an ImageInfo."""
        return ImageInfo(
            id=row[0],
            name=row[1],
            description=row[2],
            upload_date=row[3],
        )
