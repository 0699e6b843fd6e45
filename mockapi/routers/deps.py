"""Accessors for objects the application factory puts on app.state."""
from __future__ import annotations

from fastapi import Request

from mockapi.repositories.json_storage import CollectionStore


def get_store(request: Request) -> CollectionStore:
    store = getattr(getattr(request.app, "state", None), "store", None)
    if store is None:
        raise RuntimeError("CollectionStore not configured")
    return store
