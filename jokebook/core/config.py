"""
Configuration helpers for the Jokebook backend.

Exposes a frozen Settings object read from environment variables (port,
database URL, storage backend, seeding) so that routers/services do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

BACKEND_MEMORY = "memory"
BACKEND_SQL = "sql"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    database_url: str
    store_backend: str
    seed_defaults: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    database_url = (os.getenv("DATABASE_URL") or "").strip()
    backend = (os.getenv("JOKEBOOK_BACKEND") or "").strip().lower()
    if backend not in {BACKEND_MEMORY, BACKEND_SQL}:
        backend = BACKEND_SQL if database_url else BACKEND_MEMORY

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        database_url=database_url,
        store_backend=backend,
        seed_defaults=_bool(os.getenv("JOKEBOOK_SEED"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
