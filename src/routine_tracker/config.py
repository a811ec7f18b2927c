"""Environment-backed configuration."""

import os
from pathlib import Path


class Config:
    """Service configuration read from the environment at import time."""

    # Storage
    DATA_DIR = Path(os.getenv("ROUTINE_TRACKER_DATA_DIR", Path.cwd() / "data"))
    DATABASE_PATH = os.getenv("ROUTINE_TRACKER_DB")
    DB_TIMEOUT = float(os.getenv("DB_TIMEOUT", 5.0))

    # Server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", 8000))

    # CORS
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Pagination
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 10))
    MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", 100))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


config = Config()
