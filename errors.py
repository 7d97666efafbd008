"""
errors.py
---------
Exception types raised by the gallery's data and service layers.

Built-in ``FileNotFoundError`` (unreadable upload source) and ``OSError``
(unwritable download destination) are raised as-is and are not wrapped.
"""


class GalleryError(Exception):
    """Base class for all gallery errors."""


class StoreConnectionError(GalleryError, ConnectionError):
    """The database could not be reached or rejected the credentials."""


class StoreError(GalleryError):
    """A query or insert failed after a connection was acquired."""


class ImageNotFoundError(GalleryError, LookupError):
    """No image row exists for the requested id."""

    def __init__(self, image_id: int):
        super().__init__(f"No image found with ID: {image_id}")
        self.image_id = image_id
