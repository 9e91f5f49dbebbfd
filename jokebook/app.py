from __future__ import annotations

from fastapi import FastAPI

from jokebook.routers import jokebook as jokebook_router
from jokebook.services.joke_service import JokeStore
from jokebook.services.store_factory import build_store


def create_app(store: JokeStore | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn; tests pass their own store."""
    application = FastAPI(title="Jokebook API")
    application.state.joke_store = store or build_store()
    application.include_router(jokebook_router.router)
    return application


app = create_app()
