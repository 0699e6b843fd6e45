"""Registered applications and their API key pairs."""
from __future__ import annotations

from typing import Any, Mapping

from mockapi.core.errors import NotFoundError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_fields

KEYS_COLLECTION = "applicationKeysData"


class ApplicationService(CollectionService):
    collection = "applicationsData"

    def list_all(self) -> list[Record]:
        return list(self.store.get_collection(self.collection))

    def create(self, body: Mapping[str, Any]) -> Record:
        require_fields(body, ("name",), "App name required")
        return self.store.add_item(self.collection, body)

    def list_keys(self, application_id: str) -> list[Record]:
        return [
            key
            for key in self.store.get_collection(KEYS_COLLECTION)
            if key.get("application_id") == application_id
        ]

    def create_key(self, application_id: str) -> Record:
        """Issue a new public/secret key pair; both keys are generated by the store."""
        if self.store.get_item_by_id(self.collection, application_id) is None:
            raise NotFoundError("Application not found")
        return self.store.add_item(KEYS_COLLECTION, {"application_id": application_id})
