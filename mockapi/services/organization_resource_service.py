"""
Records owned by an organization and optionally assigned to one of its
agencies: employees, customers, sales people, suppliers, prospects,
certifications, practical information and proposed activities.

All of them share the same shape (``organization_id`` plus an optional
``agency_id``), so one service driven by a ResourceKind serves every
family. A record reached through the wrong organization or agency is
reported as not found.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from mockapi.core.errors import NotFoundError, ValidationError
from mockapi.domain.collections import spec_for
from mockapi.repositories.json_storage import Record
from mockapi.services.base import require_fields


@dataclass(frozen=True)
class ResourceKind:
    """
    ``required``/``required_message`` apply to every create.
    ``agency_names_required`` adds "first_name or last_name" on agency-level
    creates. ``stamp`` is forced onto created records. ``list_all_by_default``
    makes the organization listing include agency-assigned records.
    """

    collection: str
    label: str
    required: tuple[str, ...] = ()
    required_message: str = ""
    agency_names_required: bool = False
    stamp: Mapping[str, Any] = field(default_factory=dict)
    list_all_by_default: bool = False
    assign_creates_placeholder: bool = False


KINDS: dict[str, ResourceKind] = {
    "employees": ResourceKind(
        "employees",
        "Employee",
        required=("first_name", "last_name", "employee_role"),
        required_message="First name, last name, and role are required for an employee.",
        list_all_by_default=True,
    ),
    "customers": ResourceKind(
        "orgCustomers",
        "Customer",
        agency_names_required=True,
        stamp={"partner_type": "CUSTOMER"},
        assign_creates_placeholder=True,
    ),
    "sales-people": ResourceKind("salesPersons", "Sales person", stamp={"partner_type": "SALE"}),
    "suppliers": ResourceKind(
        "providers",
        "Supplier",
        agency_names_required=True,
        stamp={"partner_type": "SUPPLIER", "is_active": True},
    ),
    "prospects": ResourceKind(
        "prospects",
        "Prospect",
        agency_names_required=True,
        stamp={"partner_type": "PROSPECT"},
    ),
    "certifications": ResourceKind(
        "certifications",
        "Certification",
        required=("name", "type"),
        required_message="Name and Type are required for certification.",
    ),
    "practical-infos": ResourceKind(
        "practicalInformation",
        "Practical information",
        required=("type", "value"),
        required_message="Type and Value are required.",
    ),
    "proposed-activities": ResourceKind(
        "proposedActivities",
        "Activity",
        required=("name", "type"),
        required_message="Name and type are required.",
    ),
}


class OrganizationResourceService:
    def __init__(self, store, kind: ResourceKind) -> None:
        self.store = store
        self.kind = kind

    @property
    def id_field(self) -> str:
        return spec_for(self.kind.collection).id_field

    def list_for(
        self,
        org_id: str,
        agency_id: Optional[str] = None,
        *,
        include_agencies: Optional[bool] = None,
    ) -> list[Record]:
        if include_agencies is None:
            include_agencies = self.kind.list_all_by_default
        records = [r for r in self.store.get_collection(self.kind.collection) if r.get("organization_id") == org_id]
        if agency_id is not None:
            return [r for r in records if r.get("agency_id") == agency_id]
        if include_agencies:
            return records
        # organization-level records carry no agency, or the organization id itself
        return [r for r in records if not r.get("agency_id") or r.get("agency_id") == org_id]

    def create(self, org_id: str, body: Mapping[str, Any], agency_id: Optional[str] = None) -> Record:
        if self.kind.required:
            require_fields(body, self.kind.required, self.kind.required_message)
        if agency_id is not None and self.kind.agency_names_required:
            if not body.get("first_name") and not body.get("last_name"):
                raise ValidationError("First and last name are required.")
        data = dict(body)
        data.update(self.kind.stamp)
        data["organization_id"] = org_id
        if agency_id is not None:
            data["agency_id"] = agency_id
        return self.store.add_item(self.kind.collection, data)

    def get(self, org_id: str, item_id: str, agency_id: Optional[str] = None) -> Record:
        record = self.store.get_item_by_id(self.kind.collection, item_id)
        if record is None or record.get("organization_id") != org_id:
            raise NotFoundError(f"{self.kind.label} {item_id} not found for organization {org_id}.")
        if agency_id is not None and record.get("agency_id") != agency_id:
            raise NotFoundError(
                f"{self.kind.label} {item_id} not found for agency {agency_id} in organization {org_id}."
            )
        return record

    def update(
        self, org_id: str, item_id: str, body: Mapping[str, Any], agency_id: Optional[str] = None
    ) -> Record:
        with self.store.locked(self.kind.collection):
            self.get(org_id, item_id, agency_id)
            return self.store.update_item(self.kind.collection, item_id, body)

    def delete(self, org_id: str, item_id: str, agency_id: Optional[str] = None) -> None:
        with self.store.locked(self.kind.collection):
            self.get(org_id, item_id, agency_id)
            if not self.store.delete_item(self.kind.collection, item_id):
                raise NotFoundError(f"{self.kind.label} {item_id} not found.")

    def assign(self, org_id: str, agency_id: str, body: Mapping[str, Any]) -> Record:
        """
        Attach an existing organization record to an agency. Customers that
        are not known yet get a placeholder record carrying the given id.
        """
        id_field = self.id_field
        item_id = body.get(id_field)
        if not item_id:
            raise ValidationError(f"{id_field} is required.")
        with self.store.locked(self.kind.collection):
            existing = self.store.get_item_by_id(self.kind.collection, item_id)
            if existing is None and self.kind.assign_creates_placeholder:
                placeholder = {
                    id_field: item_id,
                    "user_id": item_id,
                    "first_name": "Affected",
                    "last_name": "Customer",
                }
                placeholder.update(self.kind.stamp)
                placeholder.update(organization_id=org_id, agency_id=agency_id)
                return self.store.add_item(self.kind.collection, placeholder)
            if existing is None or existing.get("organization_id") != org_id:
                raise NotFoundError(f"{self.kind.label} with ID {item_id} not found in this organization.")
            return self.store.update_item(self.kind.collection, item_id, {"agency_id": agency_id})
