"""Business domains (activity sectors) organizations can belong to."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from mockapi.core.errors import NotFoundError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_fields


class BusinessDomainService(CollectionService):
    collection = "businessDomains"

    def search(
        self,
        *,
        organization_id: Optional[str] = None,
        parent_domain_id: Optional[str] = None,
        name: Optional[str] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Record]:
        domains = list(self.store.get_collection(self.collection))
        if organization_id:
            domains = [d for d in domains if d.get("organization_id") == organization_id]
        if parent_domain_id:
            domains = [d for d in domains if d.get("parent_domain_id") == parent_domain_id]
        if name:
            needle = name.lower()
            domains = [d for d in domains if needle in (d.get("name") or "").lower()]
        # page is 1-based; both must be given for pagination to apply
        if page and size:
            start = (page - 1) * size
            domains = domains[start : start + size]
        return domains

    def create(self, body: Mapping[str, Any]) -> Record:
        require_fields(body, ("name", "type", "type_label"), "Name, type, and type_label are required.")
        return self.store.add_item(self.collection, body)

    def get(self, domain_id: str) -> Record:
        domain = self.store.get_item_by_id(self.collection, domain_id)
        if domain is None:
            raise NotFoundError(f"Business domain with ID {domain_id} not found.")
        return domain

    def update(self, domain_id: str, body: Mapping[str, Any]) -> Record:
        updated = self.store.update_item(self.collection, domain_id, body)
        if updated is None:
            raise NotFoundError(f"Business domain with ID {domain_id} not found.")
        return updated

    def delete(self, domain_id: str) -> None:
        if not self.store.delete_item(self.collection, domain_id):
            raise NotFoundError(f"Business domain with ID {domain_id} not found.")
