"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local SQLite file without any setup.  In a
production deployment point ``DATABASE_URL`` at the real database.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the versioned router is mounted.  Empty by
    # default so that the users resource lives at ``/users/``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # SQLAlchemy URL or a bare path to a SQLite file.  Bare relative
    # paths are resolved against the project root by
    # ``get_database_url``.
    database_url: str = os.getenv("DATABASE_URL", "users.db")
    database_echo: bool = _env_bool("DATABASE_ECHO", "false")
    database_pool_pre_ping: bool = _env_bool("DATABASE_POOL_PRE_PING", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


def get_database_url(config: "Settings") -> str:
    """Return a SQLAlchemy URL for ``config.database_url``.

    Strings containing ``://`` are treated as complete URLs and returned
    unchanged.  Anything else is a SQLite file path; relative paths are
    resolved against the project root.
    """
    db_url = config.database_url
    if "://" in db_url:
        return db_url
    path = Path(db_url)
    if not path.is_absolute():
        base_dir = Path(__file__).resolve().parent.parent.parent.parent
        path = (base_dir / path).resolve()
    return f"sqlite:///{path}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
