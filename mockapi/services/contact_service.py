"""Contacts attached to any contactable entity."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from mockapi.core.errors import NotFoundError, ValidationError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_fields

DETAIL_FIELDS = ("first_name", "last_name", "email", "phone_number")


class ContactService(CollectionService):
    collection = "contacts"

    def list_for(self, entity_type: Optional[str], entity_id: Optional[str]) -> list[Record]:
        if not entity_type or not entity_id:
            raise ValidationError("contactableType and contactableId query params are required.")
        return self._filter(contactable_type=entity_type, contactable_id=entity_id)

    def create(
        self,
        entity_type: Optional[str],
        entity_id: Optional[str],
        body: Mapping[str, Any],
        *,
        require_names: bool = False,
    ) -> Record:
        if not entity_type or not entity_id:
            raise ValidationError("contactableType and contactableId query params are required.")
        if require_names:
            require_fields(body, ("first_name", "last_name"), "First name and last name are required.")
        elif not any(body.get(f) for f in DETAIL_FIELDS):
            raise ValidationError("At least one contact detail is required.")
        data = dict(body)
        data.update(contactable_id=entity_id, contactable_type=entity_type, is_favorite=False)
        return self.store.add_item(self.collection, data)

    def get(self, contact_id: str, scope: Optional[tuple[str, str]] = None) -> Record:
        contact = self.store.get_item_by_id(self.collection, contact_id)
        if contact is None:
            raise NotFoundError(f"Contact with ID {contact_id} not found.")
        if scope is not None and not _in_scope(contact, scope):
            raise NotFoundError(f"Contact with ID {contact_id} not found for this entity.")
        return contact

    def update(self, contact_id: str, body: Mapping[str, Any], scope: Optional[tuple[str, str]] = None) -> Record:
        with self.store.locked(self.collection):
            if scope is not None:
                self.get(contact_id, scope)
            updated = self.store.update_item(self.collection, contact_id, body)
        if updated is None:
            raise NotFoundError(f"Contact with ID {contact_id} not found.")
        return updated

    def delete(self, contact_id: str, scope: Optional[tuple[str, str]] = None) -> None:
        with self.store.locked(self.collection):
            if scope is not None:
                self.get(contact_id, scope)
            deleted = self.store.delete_item(self.collection, contact_id)
        if not deleted:
            raise NotFoundError(f"Contact with ID {contact_id} not found.")

    def toggle_favorite(self, contact_id: str, scope: Optional[tuple[str, str]] = None) -> Record:
        with self.store.locked(self.collection):
            self.get(contact_id, scope)
            return self.store.toggle_favorite(self.collection, contact_id)


def _in_scope(contact: Record, scope: tuple[str, str]) -> bool:
    entity_type, entity_id = scope
    return contact.get("contactable_type") == entity_type and contact.get("contactable_id") == entity_id
