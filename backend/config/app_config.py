"""
Runtime Configuration

Reads application settings from environment variables.
All variables share the STUDENT_API_ prefix.

Includes:
- Database URL (defaults to a SQLite file in the data directory)
- Logging level and optional rotating log file
- CORS origins
"""
import os
import logging
from pathlib import Path

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "STUDENT_API_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    """
    Parse a boolean environment variable.

    Accepts 'true', '1', 'yes' (case-insensitive) as True.
    """
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def get_data_dir() -> Path:
    """Directory holding the default SQLite database and log files."""
    return Path(_env("DATA_DIR", str(Path.home() / ".student_api"))).expanduser()


def get_database_url() -> str:
    """
    Get the SQLAlchemy database URL.

    Returns:
        STUDENT_API_DATABASE_URL if set, otherwise a SQLite file in the data directory
    """
    url = _env("DATABASE_URL")
    if url:
        return url
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'students.db'}"


def get_log_level() -> int:
    """
    Get the configured logging level.

    Raises:
        ConfigurationError: If STUDENT_API_LOG_LEVEL is not a supported level
    """
    level = (_env("LOG_LEVEL", "INFO") or "INFO").strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level '{level}', expected one of {', '.join(VALID_LOG_LEVELS)}",
            invalid_keys=[f"{ENV_PREFIX}LOG_LEVEL"]
        )
    return getattr(logging, level)


def is_log_file_enabled() -> bool:
    return _env_bool("LOG_FILE_ENABLED", True)


def get_log_file() -> Path:
    return get_data_dir() / "logs" / "student_api.log"


def get_cors_origins() -> list[str]:
    """Comma-separated origins, e.g. "http://localhost:3000, http://example.com"."""
    raw = _env("CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def is_sql_echo_enabled() -> bool:
    return _env_bool("SQL_ECHO", False)
