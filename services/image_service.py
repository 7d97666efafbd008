"""
services/image_service.py
--------------------------
Upload, listing, and download of gallery images.
Moves bytes between the local filesystem and the ImageRepository.
"""

import os
from pathlib import Path

from errors import ImageNotFoundError
from models.image import Image, ImageInfo
from repositories.image_repo import ImageRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ImageService:
    """Handles the file side of image upload and download."""

    def __init__(self, repo: ImageRepository):
        self.repo = repo

    def upload(self, user_id: int, file_path: str, description: str) -> Image:
        """
        Read a local file and store it as a new image.

        Args:
            user_id: Id of the uploading user (not validated).
            file_path: Path of the file to read; also stored as the image name.
            description: Free-form text.

        Returns:
            The persisted Image with `id` and `upload_date` set.

        Raises:
            FileNotFoundError: If `file_path` is not a readable regular file.
            StoreConnectionError: If the database is unreachable.
            StoreError: If the insert fails.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"No such image file: {file_path}")
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            raise FileNotFoundError(f"Cannot read image file: {file_path}") from e

        image = Image(user_id=user_id, name=file_path, description=description, data=data)
        return self.repo.add(image)

    def list_all(self) -> list[ImageInfo]:
        """Metadata for every stored image, in no particular order."""
        return self.repo.list_all()

    def download(self, image_id: int, output_path: str) -> Path:
        """
        Write a stored image's bytes to a local file, replacing any existing file.

        Args:
            image_id: Primary key of the image.
            output_path: Destination file path.

        Returns:
            The path that was written.

        Raises:
            ImageNotFoundError: If no image has this id; nothing is written.
            OSError: If the destination cannot be written.
            StoreConnectionError: If the database is unreachable.
            StoreError: If the query fails.
        """
        data = self.repo.get_data(image_id)
        if data is None:
            raise ImageNotFoundError(image_id)

        target = Path(output_path)
        target.write_bytes(data)
        logger.info(f"Wrote image #{image_id} ({len(data)} bytes) to {target}")
        return target
