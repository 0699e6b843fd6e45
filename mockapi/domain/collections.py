"""Collection registry: file name, identifying field and flags per collection."""
from __future__ import annotations

import re
import secrets
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

_CAMEL_SPLIT = re.compile(r"(?=[A-Z])")


def id_prefix(name: str) -> str:
    """First camel-case word of the collection name, at most four chars."""
    return _CAMEL_SPLIT.split(name)[0].lower()[:4]


def _public_key() -> str:
    return f"mock_pub_key_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


def _secret_key() -> str:
    return f"mock_sec_key_{int(time.time() * 1000)}_{secrets.token_urlsafe(12)}"


@dataclass(frozen=True)
class CollectionSpec:
    """
    Capabilities of a collection.

    ``scope_fields`` + ``default_flag`` describe the "at most one default per
    scope" invariant; ``favorite_flag`` is a free per-record boolean.
    ``defaults`` are applied on add when the payload lacks the key; callable
    values are invoked to produce a fresh value.
    """

    name: str
    filename: str
    id_field: str = "id"
    scope_fields: tuple[str, ...] = ()
    default_flag: str | None = None
    favorite_flag: str | None = None
    id_factory: Callable[[], str] | None = None
    defaults: Mapping[str, Any] = field(default_factory=dict)

    @property
    def has_scope(self) -> bool:
        return bool(self.scope_fields and self.default_flag)

    def identify(self, record: Mapping[str, Any]) -> Any:
        return record.get(self.id_field)

    def scope_of(self, record: Mapping[str, Any]) -> tuple:
        return tuple(record.get(f) for f in self.scope_fields)

    def new_id(self) -> str:
        if self.id_factory is not None:
            return self.id_factory()
        return f"mock-{id_prefix(self.name)}-{int(time.time() * 1000)}-{secrets.randbelow(1_000_000):06d}"

    def server_defaults(self) -> dict:
        return {key: value() if callable(value) else value for key, value in self.defaults.items()}


def _spec(name: str, filename: str, id_field: str = "id", **kwargs) -> CollectionSpec:
    return CollectionSpec(name=name, filename=filename, id_field=id_field, **kwargs)


COLLECTIONS: dict[str, CollectionSpec] = {
    s.name: s
    for s in (
        _spec("authUsers", "auth-users.json"),
        _spec("authRoles", "auth-roles.json"),
        _spec("authPermissions", "auth-permissions.json"),
        _spec("authRolePermissions", "auth-role-permissions.json"),
        _spec("authRbacResources", "auth-rbac-resources.json"),
        _spec("organizationsTableRows", "organizations-table-rows.json", "organization_id"),
        _spec("organizationsDetails", "organizations-details.json", "organization_id"),
        _spec(
            "contacts",
            "contacts.json",
            "contact_id",
            favorite_flag="is_favorite",
            defaults={"is_favorite": False},
        ),
        _spec(
            "addresses",
            "addresses.json",
            "address_id",
            scope_fields=("addressable_id", "addressable_type"),
            default_flag="is_default",
            defaults={"is_default": False},
        ),
        _spec("agencies", "agencies.json", "agency_id"),
        _spec("employees", "employees.json", "employee_id"),
        _spec("salesPersons", "sales-persons.json", "sales_person_id"),
        _spec("orgCustomers", "org-customers.json", "customer_id"),
        _spec("providers", "providers.json", "provider_id"),
        _spec("userPreferences", "user-preferences.json", "user_id"),
        _spec("prospects", "prospects.json", "prospect_id"),
        _spec("practicalInformation", "practical-information.json", "information_id"),
        _spec("certifications", "certifications.json", "certification_id"),
        _spec("businessDomains", "business-domains.json"),
        _spec("organizationImages", "organization-images.json"),
        _spec("thirdParties", "third-parties.json"),
        _spec("proposedActivities", "proposed-activities.json", "activity_id"),
        _spec("businessActors", "business-actors.json", "business_actor_id"),
        _spec("applicationsData", "applications-data.json"),
        _spec(
            "applicationKeysData",
            "application-keys.json",
            "public_key",
            id_factory=_public_key,
            defaults={"secret_key": _secret_key},
        ),
    )
}


def kebab(name: str) -> str:
    return "-".join(part.lower() for part in _CAMEL_SPLIT.split(name) if part)


def spec_for(name: str) -> CollectionSpec:
    """Registered spec, or a generic one (``id`` key, kebab-case file) for unknown names."""
    spec = COLLECTIONS.get(name)
    if spec is not None:
        return spec
    if not name or not re.fullmatch(r"[A-Za-z][A-Za-z0-9_]*", name):
        raise ValueError(f"Invalid collection name: {name!r}")
    return CollectionSpec(name=name, filename=f"{kebab(name)}.json")
