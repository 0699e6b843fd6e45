"""
Organizations and the records that hang off them (agencies, third parties).

Deleting an organization or an agency removes only that record: agencies,
employees, addresses or contacts pointing at it are left in place and stay
queryable.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from mockapi.core.errors import NotFoundError, ValidationError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_bool, require_fields

DETAILS = "organizationsDetails"
TABLE_ROWS = "organizationsTableRows"
AGENCIES = "agencies"
THIRD_PARTIES = "thirdParties"

ORGANIZATION_REQUIRED = ("long_name", "short_name", "email", "description", "legal_form", "business_domains")
# fields mirrored from the details record onto the listing row
TABLE_ROW_FIELDS = ("long_name", "short_name", "email", "description", "logo_url", "legal_form", "status")
INDIVIDUAL_BUSINESS_LEGAL_FORM = "11"


class OrganizationService(CollectionService):
    collection = DETAILS

    # -------------------------- organizations --------------------------
    def list_all(self) -> list[Record]:
        return list(self.store.get_collection(DETAILS))

    def list_by_domain(self, domain_id: str) -> list[Record]:
        return [o for o in self.store.get_collection(DETAILS) if domain_id in (o.get("business_domains") or ())]

    def create(self, body: Mapping[str, Any]) -> Record:
        """New organizations start PENDING_APPROVAL and inactive, with a matching table row."""
        require_fields(body, ORGANIZATION_REQUIRED, "Missing required fields for organization.")
        data = dict(body)
        if "web_site_url" in data and "website_url" not in data:
            data["website_url"] = data.pop("web_site_url")
        data.update(
            status="PENDING_APPROVAL",
            is_active=False,
            is_individual_business=body.get("legal_form") == INDIVIDUAL_BUSINESS_LEGAL_FORM,
        )
        org = self.store.add_item(DETAILS, data)
        row = {key: org.get(key) for key in TABLE_ROW_FIELDS}
        row["organization_id"] = org["organization_id"]
        self.store.add_item(TABLE_ROWS, row)
        return org

    def get(self, org_id: str) -> Record:
        org = self.store.get_item_by_id(DETAILS, org_id)
        if org is None:
            raise NotFoundError(f"Organization with ID {org_id} not found.")
        return org

    def update(self, org_id: str, body: Mapping[str, Any]) -> Record:
        updated = self.store.update_item(DETAILS, org_id, body)
        if updated is None:
            raise NotFoundError(f"Organization with ID {org_id} not found.")
        # the table row may not exist for every organization
        self.store.update_item(TABLE_ROWS, org_id, {key: updated.get(key) for key in TABLE_ROW_FIELDS})
        return updated

    def add_domain(self, org_id: str, domain_id: str) -> Record:
        with self.store.locked(DETAILS):
            org = self.get(org_id)
            domains = list(org.get("business_domains") or [])
            if domain_id in domains:
                return org
            return self.store.update_item(DETAILS, org_id, {"business_domains": domains + [domain_id]})

    def remove_domain(self, org_id: str, domain_id: str) -> Record:
        with self.store.locked(DETAILS):
            org = self.store.get_item_by_id(DETAILS, org_id)
            if org is None or org.get("business_domains") is None:
                raise NotFoundError(f"Organization with ID {org_id} or its domains not found.")
            domains = [d for d in org["business_domains"] if d != domain_id]
            if len(domains) == len(org["business_domains"]):
                return org
            return self.store.update_item(DETAILS, org_id, {"business_domains": domains})

    def delete(self, org_id: str) -> None:
        if not self.store.delete_item(DETAILS, org_id):
            raise NotFoundError(f"Organization with ID {org_id} not found.")

    def update_status(self, org_id: str, body: Mapping[str, Any]) -> Record:
        status = body.get("status")
        if not status:
            raise ValidationError("Field 'status' is required.")
        updated = self.store.update_item(DETAILS, org_id, {"status": status, "is_active": status == "ACTIVE"})
        if updated is None:
            raise NotFoundError(f"Organization with ID {org_id} not found.")
        # the table row may not exist for every organization
        self.store.update_item(TABLE_ROWS, org_id, {"status": status})
        return updated

    # -------------------------- agencies --------------------------
    def list_agencies(self, org_id: str, active: Optional[bool] = None) -> list[Record]:
        agencies = [a for a in self.store.get_collection(AGENCIES) if a.get("organization_id") == org_id]
        if active is not None:
            agencies = [a for a in agencies if a.get("is_active") == active]
        return agencies

    def create_agency(self, org_id: str, body: Mapping[str, Any]) -> Record:
        if not all(body.get(f) for f in ("short_name", "long_name", "location")) or not body.get("business_domains"):
            raise ValidationError(
                "Short name, long name, location, and at least one business domain are required."
            )
        data = dict(body)
        data.update(organization_id=org_id, is_headquarter=False, is_active=True)
        return self.store.add_item(AGENCIES, data)

    def get_agency(self, org_id: str, agency_id: str) -> Record:
        agency = self.store.get_item_by_id(AGENCIES, agency_id)
        if agency is None or agency.get("organization_id") != org_id:
            raise NotFoundError(f"Agency with ID {agency_id} not found for organization {org_id}.")
        return agency

    def update_agency(self, org_id: str, agency_id: str, body: Mapping[str, Any]) -> Record:
        with self.store.locked(AGENCIES):
            self.get_agency(org_id, agency_id)
            return self.store.update_item(AGENCIES, agency_id, body)

    def delete_agency(self, org_id: str, agency_id: str) -> None:
        with self.store.locked(AGENCIES):
            self.get_agency(org_id, agency_id)
            if not self.store.delete_item(AGENCIES, agency_id):
                raise NotFoundError(f"Agency with ID {agency_id} not found.")

    def set_agency_status(self, org_id: str, agency_id: str, body: Mapping[str, Any]) -> Record:
        active = require_bool(body, "active")
        return self.update_agency(org_id, agency_id, {"is_active": active})

    # -------------------------- third parties --------------------------
    def list_third_parties(
        self,
        org_id: str,
        *,
        status: Optional[bool] = None,
        type_: Optional[str] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Record]:
        records = [t for t in self.store.get_collection(THIRD_PARTIES) if t.get("organization_id") == org_id]
        if status is not None:
            records = [t for t in records if t.get("is_active") == status]
        if type_:
            records = [t for t in records if t.get("type") == type_]
        if page and size:
            start = (page - 1) * size
            records = records[start : start + size]
        return records

    def create_third_party(self, org_id: str, body: Mapping[str, Any], type_: Optional[str] = None) -> Record:
        """``type_`` comes from the path on /third-parties/{type}; otherwise the body must carry it."""
        if type_ is None:
            require_fields(body, ("name", "type"), "Third party name and type are required.")
        else:
            require_fields(body, ("name",), "Third party name is required.")
        data = dict(body)
        data["organization_id"] = org_id
        if type_ is not None:
            data.update(type=type_, is_active=True)
        return self.store.add_item(THIRD_PARTIES, data)

    def get_third_party(self, org_id: str, third_party_id: str) -> Record:
        existing = self.store.get_item_by_id(THIRD_PARTIES, third_party_id)
        if existing is None or existing.get("organization_id") != org_id:
            raise NotFoundError(f"Third party {third_party_id} not found for org {org_id}.")
        return existing

    def update_third_party(self, org_id: str, third_party_id: str, body: Mapping[str, Any]) -> Record:
        with self.store.locked(THIRD_PARTIES):
            self.get_third_party(org_id, third_party_id)
            return self.store.update_item(THIRD_PARTIES, third_party_id, body)

    def delete_third_party(self, org_id: str, third_party_id: str) -> None:
        with self.store.locked(THIRD_PARTIES):
            self.get_third_party(org_id, third_party_id)
            if not self.store.delete_item(THIRD_PARTIES, third_party_id):
                raise NotFoundError(f"Third party {third_party_id} not found.")

    def set_third_party_active(self, org_id: str, third_party_id: str, body: Mapping[str, Any]) -> Record:
        """The /details/{id}/status variant: writes ``is_active``."""
        active = require_bool(body, "active")
        return self.update_third_party(org_id, third_party_id, {"is_active": active})

    def set_third_party_status(self, org_id: str, third_party_id: str, body: Mapping[str, Any]) -> Record:
        """
        Validates ``active`` but applies an empty update: only updated_at
        moves. Kept as-is until the third-party record grows a status field.
        """
        require_bool(body, "active")
        with self.store.locked(THIRD_PARTIES):
            self.get_third_party(org_id, third_party_id)
            return self.store.update_item(THIRD_PARTIES, third_party_id, {})
