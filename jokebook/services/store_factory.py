"""Builds the JokeStore for the backend selected in Settings."""
from __future__ import annotations

from jokebook.core.config import BACKEND_SQL, Settings, get_settings
from jokebook.core.logging import get_logger
from jokebook.domain.jokes import DEFAULT_JOKES
from jokebook.repositories.base import JokeRepository
from jokebook.repositories.memory_repository import MemoryRepository
from jokebook.services.joke_service import JokeStore

logger = get_logger(__name__)


def build_repository(settings: Settings) -> JokeRepository:
    if settings.store_backend == BACKEND_SQL:
        # imported lazily so the memory backend never needs a database driver
        from jokebook.db.create_tables import create_all
        from jokebook.repositories.sql_repository import SQLRepository

        create_all()
        return SQLRepository()
    return MemoryRepository()


def build_store(settings: Settings | None = None) -> JokeStore:
    """Create the configured store and seed it when it holds no jokes."""
    settings = settings or get_settings()
    store = JokeStore(build_repository(settings))
    logger.info("Using %s joke store", settings.store_backend)
    if settings.seed_defaults:
        store.seed(DEFAULT_JOKES)
    return store
