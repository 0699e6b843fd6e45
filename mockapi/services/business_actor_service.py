"""Business actors (people acting for organizations), filterable by type."""
from __future__ import annotations

from typing import Any, Mapping

from mockapi.core.errors import NotFoundError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_fields


class BusinessActorService(CollectionService):
    collection = "businessActors"

    def list_all(self) -> list[Record]:
        return list(self.store.get_collection(self.collection))

    def list_by_type(self, actor_type: str) -> list[Record]:
        return self._filter(type=actor_type)

    def create(self, body: Mapping[str, Any]) -> Record:
        require_fields(body, ("first_name",), "First name is required for Business Actor.")
        return self.store.add_item(self.collection, body)

    def get(self, actor_id: str) -> Record:
        actor = self.store.get_item_by_id(self.collection, actor_id)
        if actor is None:
            raise NotFoundError(f"Business Actor {actor_id} not found.")
        return actor

    def update(self, actor_id: str, body: Mapping[str, Any]) -> Record:
        updated = self.store.update_item(self.collection, actor_id, body)
        if updated is None:
            raise NotFoundError(f"Business Actor {actor_id} not found.")
        return updated

    def delete(self, actor_id: str) -> None:
        if not self.store.delete_item(self.collection, actor_id):
            raise NotFoundError(f"Business Actor {actor_id} not found.")
