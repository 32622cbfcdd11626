import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .utils.constants import (
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_TIMEZONE,
    DEFAULT_USERS_FILE,
    MAX_RENTAL_DAYS as DEFAULT_MAX_DAYS,
)

# Load environment variables from a .env file in the working directory
load_dotenv(Path.cwd() / ".env")


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


class Config:
    """Configuration for the rental console."""

    USERS_FILE = os.getenv("RENTAL_USERS_FILE", DEFAULT_USERS_FILE)
    ADMIN_USERNAME = os.getenv("RENTAL_ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME)
    ADMIN_PASSWORD = os.getenv("RENTAL_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)
    MAX_RENTAL_DAYS = max(1, _int_env("RENTAL_MAX_DAYS", DEFAULT_MAX_DAYS))
    TIMEZONE = os.getenv("RENTAL_TIMEZONE", DEFAULT_TIMEZONE)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level="WARNING"):
    """
    Send log records to stderr so they never mix with menu output.
    An unknown level name falls back to WARNING.
    """
    level = str(level).upper()
    if level not in LOG_LEVELS:
        level = "WARNING"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
