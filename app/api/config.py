"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

STORE_BACKENDS = ("sqlite", "memory")


def get_store_backend() -> str:
    """Get store backend name ('sqlite' or 'memory')."""
    backend = os.getenv("STORE_BACKEND", "sqlite").strip().lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown STORE_BACKEND {backend!r}, expected one of {', '.join(STORE_BACKENDS)}"
        )
    return backend


def get_database_path() -> str:
    """Get database file path from DATABASE_URL (sqlite:///path or a bare path) or default."""
    url = os.getenv("DATABASE_URL", "").strip()
    if "://" in url and not url.startswith("sqlite:///"):
        raise ValueError(f"Unsupported DATABASE_URL {url!r}, only sqlite:/// URLs are supported")
    return url.replace("sqlite:///", "", 1) or str(
        Path(__file__).resolve().parents[2] / "data" / "movies.db"
    )


def get_seed_data() -> bool:
    """Whether to insert the seed movies into an empty store."""
    return os.getenv("SEED_DATA", "true").strip().lower() in ("1", "true", "yes", "on")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8080"))


def get_shutdown_grace_seconds() -> int:
    """Seconds to wait for in-flight requests on shutdown."""
    return int(os.getenv("SHUTDOWN_GRACE_SECONDS", "5"))
