from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the jokebook package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jokebook.core import config as core_config  # noqa: E402
from jokebook.repositories.memory_repository import MemoryRepository  # noqa: E402
from jokebook.services.store_factory import build_store  # noqa: E402


@pytest.fixture()
def fresh_settings(monkeypatch):
    for name in ("PORT", "DATABASE_URL", "JOKEBOOK_BACKEND", "JOKEBOOK_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = core_config.get_settings()
    assert settings.port == 3000
    assert settings.store_backend == core_config.BACKEND_MEMORY
    assert settings.seed_defaults is True
    assert settings.log_level == "INFO"


def test_invalid_port_falls_back(fresh_settings):
    fresh_settings.setenv("PORT", "not-a-port")
    assert core_config.get_settings().port == 3000


def test_database_url_selects_sql_backend(fresh_settings):
    fresh_settings.setenv("DATABASE_URL", "sqlite:///jokes.db")
    assert core_config.get_settings().store_backend == core_config.BACKEND_SQL


def test_explicit_backend_wins(fresh_settings):
    fresh_settings.setenv("DATABASE_URL", "sqlite:///jokes.db")
    fresh_settings.setenv("JOKEBOOK_BACKEND", "memory")
    assert core_config.get_settings().store_backend == core_config.BACKEND_MEMORY


def test_build_store_seeds_memory_backend(fresh_settings):
    store = build_store(core_config.get_settings())
    assert isinstance(store.repository, MemoryRepository)
    assert store.list_categories() == ["funnyJoke", "lameJoke"]


def test_build_store_without_seed(fresh_settings):
    fresh_settings.setenv("JOKEBOOK_SEED", "false")
    store = build_store(core_config.get_settings())
    assert store.list_categories() == []
