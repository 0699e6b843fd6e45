"""
Configuration helpers for the mock API.

Routers/services never read os.environ directly; they go through
get_settings(), which is cached per process. Tests call
get_settings.cache_clear() after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "json-data"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    log_level: str
    preload_collections: bool
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip().rstrip("/") for item in (value or "").split(",") if item.strip())

    data_dir = (os.getenv("MOCK_DATA_DIR") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        preload_collections=_bool(os.getenv("MOCK_PRELOAD"), False),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
