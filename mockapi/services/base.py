"""Helpers shared by the collection-backed services."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from mockapi.core.errors import ValidationError
from mockapi.repositories.json_storage import CollectionStore, Record


class CollectionService:
    """Base for services bound to one primary collection."""

    collection: str = ""

    def __init__(self, store: CollectionStore) -> None:
        self.store = store

    def _filter(self, **criteria: Any) -> list[Record]:
        return [
            record
            for record in self.store.get_collection(self.collection)
            if all(record.get(key) == value for key, value in criteria.items())
        ]


def require_fields(body: Mapping[str, Any], fields: Iterable[str], message: str) -> None:
    """Raise ValidationError unless every field holds a truthy value."""
    if any(not body.get(f) for f in fields):
        raise ValidationError(message)


def require_bool(body: Mapping[str, Any], field: str) -> bool:
    value = body.get(field)
    if not isinstance(value, bool):
        raise ValidationError(f"Field '{field}' (boolean) is required.")
    return value
