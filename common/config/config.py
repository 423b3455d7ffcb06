"""
Configuration module for the showcase server.

Values are read once from the environment (and an optional .env file) at
import time. The application factory copies them into the Quart config, so
tests override them per app instead of touching the environment.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent / "showcase"


def get_bool(key: str, default: bool) -> bool:
    """Read a boolean flag such as "true"/"1"/"yes" from the environment."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_int(key: str, default: int) -> int:
    """Read an integer from the environment or raise if it is malformed."""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise Exception(f"{key} must be an integer, got {value!r}")


# ============================================================================
# Listener
# ============================================================================

APP_HOST = os.getenv("APP_HOST", "localhost")
APP_PORT = get_int("APP_PORT", 3000)
APP_DEBUG = get_bool("APP_DEBUG", False)

# Prefork: the parent binds the socket and spawns APP_WORKERS children.
# 0 means one worker per CPU.
APP_PREFORK = get_bool("APP_PREFORK", True)
APP_WORKERS = get_int("APP_WORKERS", 0)

# ============================================================================
# Timeouts (seconds)
# ============================================================================

APP_IDLE_TIMEOUT = get_int("APP_IDLE_TIMEOUT", 5)
APP_READ_TIMEOUT = get_int("APP_READ_TIMEOUT", 5)
APP_WRITE_TIMEOUT = get_int("APP_WRITE_TIMEOUT", 5)

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
APP_LOG_FILE = os.getenv("APP_LOG_FILE")

# ============================================================================
# Files
# ============================================================================

UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "./target"))
SAMPLE_DIR = Path(os.getenv("SAMPLE_DIR", str(PACKAGE_DIR / "samples")))
SAMPLE_FILE_NAME = os.getenv("SAMPLE_FILE_NAME", "sample.txt")

# Uploads accepted per client per minute
UPLOAD_RATE_LIMIT = get_int("UPLOAD_RATE_LIMIT", 30)
