"""Entry point for uvicorn/gunicorn: ``uvicorn mockapi.app_factory:app``."""
from mockapi.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
