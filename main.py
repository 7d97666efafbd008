"""
main.py
-------
Entry point for the image gallery console.

Responsibilities:
    - Build the storage gateway and make sure the schema exists.
    - Wire repositories and services together.
    - Run the interactive menu until the user exits.
"""

import sys

from db.connection import StorageGateway
from db.init_db import create_tables
from errors import GalleryError
from handlers.menu_handler import GalleryShell
from repositories.image_repo import ImageRepository
from repositories.user_repo import UserRepository
from services.account_service import AccountService
from services.image_service import ImageService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_shell(gateway: StorageGateway) -> GalleryShell:
    """Construct the services over one gateway and hand them to the shell."""
    accounts = AccountService(UserRepository(gateway))
    images = ImageService(ImageRepository(gateway))
    return GalleryShell(accounts, images)


def main() -> int:
    """Initialize the database and run the gallery menu."""

    # ── 1. Database setup ─────────────────────────────────
    gateway = StorageGateway()
    logger.info("Initializing database...")
    try:
        create_tables(gateway)
    except GalleryError as e:
        logger.error(f"Database setup failed: {e}")
        print("Could not initialize the database. Check the DB_* settings in .env.")
        return 1

    # ── 2. Run the menu ───────────────────────────────────
    build_shell(gateway).run()
    logger.info("Gallery stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
