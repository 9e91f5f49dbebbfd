"""Entry point for the public FastAPI app."""
from jokebook.app import app, create_app

__all__ = ["app", "create_app"]
