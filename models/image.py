"""
models/image.py
---------------
Domain models for uploaded images.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Image:
    """
    An uploaded image with its binary payload.

    Attributes:
        user_id: Id of the uploading user (not checked against the users table).
        name: Filesystem path the image was read from; doubles as display name.
        description: Free-form text supplied by the uploader.
        data: Raw file bytes, stored verbatim.
        id: Database primary key (None for new records).
        upload_date: Assigned by the database on insert.
    """
    user_id: int
    name: str
    description: str = ""
    data: bytes = field(default=b"", repr=False)
    id: Optional[int] = None
    upload_date: Optional[datetime] = None


@dataclass
class ImageInfo:
    """Listing view of an image, without the payload."""
    id: int
    name: str
    description: Optional[str]
    upload_date: Optional[datetime]

    def __str__(self) -> str:
        return (
            f"Image ID: {self.id}\n"
            f"Image Name: {self.name}\n"
            f"Description: {self.description}\n"
            f"Upload Date: {self.upload_date}"
        )
