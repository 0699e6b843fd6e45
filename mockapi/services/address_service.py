"""Addresses attached to any addressable entity (organization, agency, customer...)."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from mockapi.core.errors import NotFoundError, ValidationError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_fields

REQUIRED_FIELDS = ("address_line_1", "city", "state", "zip_code")
SCOPE_FIELDS = ("addressable_id", "addressable_type")
DEFAULT_FLAG = "is_default"


class AddressService(CollectionService):
    collection = "addresses"

    def list_for(self, entity_type: Optional[str], entity_id: Optional[str]) -> list[Record]:
        if not entity_type or not entity_id:
            raise ValidationError("addressableType and addressableId query params are required.")
        return self._filter(addressable_type=entity_type, addressable_id=entity_id)

    def create(
        self,
        entity_type: Optional[str],
        entity_id: Optional[str],
        body: Mapping[str, Any],
        *,
        require_country: bool = False,
    ) -> Record:
        if not entity_type or not entity_id:
            raise ValidationError("addressableType and addressableId query params are required.")
        if require_country:
            require_fields(
                body,
                REQUIRED_FIELDS + ("country_id",),
                "Address line 1, city, state, country and zip code are required.",
            )
            is_default = bool(body.get("default"))
        else:
            require_fields(body, REQUIRED_FIELDS, "Address line 1, city, state, and zip code are required.")
            is_default = False
        data = dict(body)
        data.update(addressable_id=entity_id, addressable_type=entity_type, is_default=False)
        with self.store.locked(self.collection):
            created = self.store.add_item(self.collection, data)
            if is_default:
                # Other defaults in the scope are cleared by the store.
                created = self.store.set_default(self.collection, created["address_id"])
        return created

    def get(self, address_id: str, scope: Optional[tuple[str, str]] = None) -> Record:
        address = self.store.get_item_by_id(self.collection, address_id)
        if address is None:
            raise NotFoundError(f"Address with ID {address_id} not found.")
        if scope is not None and not _in_scope(address, scope):
            raise NotFoundError(f"Address with ID {address_id} not found for this entity.")
        return address

    def update(self, address_id: str, body: Mapping[str, Any], scope: Optional[tuple[str, str]] = None) -> Record:
        """
        Merge ``body`` onto the address. ``is_default: true`` goes through
        set_default; a default address moved to another entity loses its
        flag so the target scope keeps a single default.
        """
        changes = dict(body)
        make_default = changes.pop(DEFAULT_FLAG, None)
        with self.store.locked(self.collection):
            current = self.get(address_id, scope)
            moved = any(field in changes and changes[field] != current.get(field) for field in SCOPE_FIELDS)
            if make_default is not None and not make_default:
                changes[DEFAULT_FLAG] = False
            elif moved and current.get(DEFAULT_FLAG):
                changes[DEFAULT_FLAG] = False
            updated = self.store.update_item(self.collection, address_id, changes)
            if updated is None:
                raise NotFoundError(f"Address with ID {address_id} not found.")
            if make_default:
                updated = self.store.set_default(self.collection, address_id)
        return updated

    def delete(self, address_id: str, scope: Optional[tuple[str, str]] = None) -> None:
        with self.store.locked(self.collection):
            if scope is not None:
                self.get(address_id, scope)
            deleted = self.store.delete_item(self.collection, address_id)
        if not deleted:
            raise NotFoundError(f"Address with ID {address_id} not found.")

    def set_default(self, address_id: str, scope: Optional[tuple[str, str]] = None) -> Record:
        with self.store.locked(self.collection):
            self.get(address_id, scope)
            return self.store.set_default(self.collection, address_id)


def _in_scope(address: Record, scope: tuple[str, str]) -> bool:
    entity_type, entity_id = scope
    return address.get("addressable_type") == entity_type and address.get("addressable_id") == entity_id
