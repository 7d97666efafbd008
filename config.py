"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "image_gallery")
DB_USER: str = os.getenv("DB_USER", "gallery_user")
DB_PASS: str = os.getenv("DB_PASS", "")


def build_database_url(user: str, password: str, host: str, port: int, name: str) -> str:
    """Assemble a libpq URL, percent-encoding the credentials."""
    return f"postgresql://{quote(user, safe='')}:{quote(password, safe='')}@{host}:{port}/{name}"


DATABASE_URL: str = build_database_url(DB_USER, DB_PASS, DB_HOST, DB_PORT, DB_NAME)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
