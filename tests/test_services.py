from __future__ import annotations

import pytest

from mockapi.core.errors import NotFoundError, ValidationError
from mockapi.services.address_service import AddressService
from mockapi.services.application_service import ApplicationService
from mockapi.services.business_domain_service import BusinessDomainService
from mockapi.services.contact_service import ContactService
from mockapi.services.organization_service import OrganizationService
from mockapi.services.preferences_service import DEFAULT_PREFERENCES, PreferencesService
from mockapi.services.user_service import UserService

ADDRESS = {"address_line_1": "1 Main St", "city": "Lisbon", "state": "LX", "zip_code": "1000"}


def test_address_create_requires_scope_and_fields(store):
    svc = AddressService(store)
    with pytest.raises(ValidationError):
        svc.create(None, "org-1", ADDRESS)
    with pytest.raises(ValidationError):
        svc.create("ORGANIZATION", "org-1", {"city": "Lisbon"})
    with pytest.raises(ValidationError):
        svc.create("ORGANIZATION", "org-1", ADDRESS, require_country=True)


def test_address_create_forces_scope_and_default_flag(store):
    svc = AddressService(store)
    created = svc.create("ORGANIZATION", "org-1", {**ADDRESS, "is_default": True, "addressable_id": "x"})
    assert created["addressable_id"] == "org-1"
    assert created["addressable_type"] == "ORGANIZATION"
    assert created["is_default"] is False

    scoped = svc.create("AGENCY", "ag-1", {**ADDRESS, "country_id": "PT", "default": True}, require_country=True)
    assert scoped["is_default"] is True


def test_address_scope_mismatch_is_not_found(org_addresses):
    svc = AddressService(org_addresses)
    assert svc.get("A", scope=("ORGANIZATION", "org-1"))["address_id"] == "A"
    with pytest.raises(NotFoundError):
        svc.get("A", scope=("ORGANIZATION", "org-2"))
    with pytest.raises(NotFoundError):
        svc.set_default("B", scope=("ORGANIZATION", "org-2"))
    with pytest.raises(NotFoundError):
        svc.delete("A", scope=("AGENCY", "org-1"))
    assert org_addresses.get_item_by_id("addresses", "A") is not None


def test_address_set_default(org_addresses):
    svc = AddressService(org_addresses)
    result = svc.set_default("B", scope=("ORGANIZATION", "org-1"))
    assert result["is_default"] is True
    assert [a["address_id"] for a in svc.list_for("ORGANIZATION", "org-1") if a["is_default"]] == ["B"]


def _default_ids(store, entity_type="ORGANIZATION", entity_id="org-1"):
    return [
        a["address_id"]
        for a in AddressService(store).list_for(entity_type, entity_id)
        if a["is_default"]
    ]


def test_scoped_create_with_default_moves_flag(org_addresses):
    svc = AddressService(org_addresses)
    created = svc.create(
        "ORGANIZATION", "org-1", {**ADDRESS, "country_id": "PT", "default": True}, require_country=True
    )
    assert created["is_default"] is True
    assert _default_ids(org_addresses) == [created["address_id"]]


def test_update_with_is_default_goes_through_set_default(org_addresses):
    svc = AddressService(org_addresses)
    result = svc.update("C", {"is_default": True, "city": "Porto"})
    assert result["is_default"] is True
    assert result["city"] == "Porto"
    assert _default_ids(org_addresses) == ["C"]

    svc.update("C", {"is_default": False})
    assert _default_ids(org_addresses) == []


def test_moving_default_address_to_another_entity_clears_its_flag(org_addresses):
    org_addresses.add_item(
        "addresses",
        {"address_id": "D", "addressable_id": "org-2", "addressable_type": "ORGANIZATION", "is_default": True},
    )
    svc = AddressService(org_addresses)
    moved = svc.update("A", {"addressable_id": "org-2"})
    assert moved["is_default"] is False
    assert _default_ids(org_addresses, entity_id="org-2") == ["D"]


def test_moving_address_with_is_default_becomes_the_new_scope_default(org_addresses):
    org_addresses.add_item(
        "addresses",
        {"address_id": "D", "addressable_id": "org-2", "addressable_type": "ORGANIZATION", "is_default": True},
    )
    svc = AddressService(org_addresses)
    svc.update("B", {"addressable_id": "org-2", "is_default": True})
    assert _default_ids(org_addresses, entity_id="org-2") == ["B"]
    assert _default_ids(org_addresses) == ["A"]


def test_contact_create_rules(store):
    svc = ContactService(store)
    with pytest.raises(ValidationError):
        svc.create("ORGANIZATION", "org-1", {})
    created = svc.create("ORGANIZATION", "org-1", {"email": "a@example.com", "is_favorite": True})
    assert created["is_favorite"] is False
    with pytest.raises(ValidationError):
        svc.create("ORGANIZATION", "org-1", {"first_name": "Ana"}, require_names=True)


def test_contact_toggle_favorite_respects_scope(store):
    svc = ContactService(store)
    created = svc.create("ORGANIZATION", "org-1", {"first_name": "Ana"})
    with pytest.raises(NotFoundError):
        svc.toggle_favorite(created["contact_id"], scope=("ORGANIZATION", "org-9"))
    assert svc.toggle_favorite(created["contact_id"])["is_favorite"] is True


def test_application_keys(store):
    svc = ApplicationService(store)
    with pytest.raises(ValidationError):
        svc.create({})
    app = svc.create({"name": "billing"})
    with pytest.raises(NotFoundError):
        svc.create_key("missing-app")
    key = svc.create_key(app["id"])
    assert key["application_id"] == app["id"]
    assert key["public_key"] and key["secret_key"]
    assert svc.list_keys(app["id"]) == [key]
    assert svc.list_keys("other") == []


def test_business_domain_search_and_pagination(store):
    svc = BusinessDomainService(store)
    for index in range(5):
        svc.create({"name": f"Retail {index}", "type": "T", "type_label": "Type", "organization_id": "org-1"})
    svc.create({"name": "Health", "type": "T", "type_label": "Type", "organization_id": "org-2"})

    assert len(svc.search(organization_id="org-1")) == 5
    assert [d["name"] for d in svc.search(name="health")] == ["Health"]
    page = svc.search(organization_id="org-1", page=2, size=2)
    assert [d["name"] for d in page] == ["Retail 2", "Retail 3"]


def test_user_lookups_hide_password_hash(store):
    store.add_item("authUsers", {"id": "u1", "username": "ana", "email": "ana@example.com", "password_hash": "x"})
    svc = UserService(store)
    assert "password_hash" not in svc.get_by_id("u1")
    assert svc.get_by_username("ana")["id"] == "u1"
    assert all("password_hash" not in u for u in svc.list_users())
    with pytest.raises(NotFoundError) as exc:
        svc.get_by_id("missing-id")
    assert "missing-id" in exc.value.message


def test_preferences_get_or_create_and_merge(store):
    svc = PreferencesService(store)
    prefs = svc.get_or_create("u1")
    assert prefs["display"] == DEFAULT_PREFERENCES["display"]

    updated = svc.update("u1", {"display": {"theme": "dark"}, "privacy": {"visibility": "public"}})
    assert updated["display"]["theme"] == "dark"
    assert updated["display"]["language"] == "en"
    assert updated["privacy"]["visibility"] == "public"
    assert updated["notifications"] == DEFAULT_PREFERENCES["notifications"]
    assert len(store.get_collection("userPreferences")) == 1
    # defaults are copied, not shared
    assert DEFAULT_PREFERENCES["display"]["theme"] == "system"


def test_preferences_update_creates_missing(store):
    updated = PreferencesService(store).update("u2", {"notifications": {"sms": True}})
    assert updated["user_id"] == "u2"
    assert updated["notifications"]["sms"] is True


def test_organization_status_updates_details_and_row(store):
    store.add_item("organizationsDetails", {"organization_id": "org-1", "status": "PENDING"})
    store.add_item("organizationsTableRows", {"organization_id": "org-1", "status": "PENDING"})
    svc = OrganizationService(store)

    updated = svc.update_status("org-1", {"status": "ACTIVE"})

    assert updated["is_active"] is True
    assert store.get_item_by_id("organizationsTableRows", "org-1")["status"] == "ACTIVE"
    with pytest.raises(NotFoundError):
        svc.update_status("org-404", {"status": "ACTIVE"})


def test_organization_delete_leaves_orphans(store):
    store.add_item("organizationsDetails", {"organization_id": "org-1"})
    store.add_item("agencies", {"agency_id": "ag-1", "organization_id": "org-1"})
    svc = OrganizationService(store)
    svc.delete("org-1")
    assert store.get_item_by_id("organizationsDetails", "org-1") is None
    assert svc.get_agency("org-1", "ag-1")["agency_id"] == "ag-1"


def test_agency_status_requires_boolean_and_scope(store):
    store.add_item("agencies", {"agency_id": "ag-1", "organization_id": "org-1", "is_active": True})
    svc = OrganizationService(store)
    with pytest.raises(ValidationError):
        svc.set_agency_status("org-1", "ag-1", {"active": "false"})
    with pytest.raises(NotFoundError):
        svc.set_agency_status("org-2", "ag-1", {"active": False})
    assert svc.set_agency_status("org-1", "ag-1", {"active": False})["is_active"] is False


def test_third_party_status_applies_empty_update(store):
    store.add_item("thirdParties", {"id": "tp-1", "organization_id": "org-1", "name": "Acme"})
    before = dict(store.get_item_by_id("thirdParties", "tp-1"))
    updated = OrganizationService(store).set_third_party_status("org-1", "tp-1", {"active": False})
    assert {k: v for k, v in updated.items() if k != "updated_at"} == {
        k: v for k, v in before.items() if k != "updated_at"
    }
    assert "active" not in updated and "is_active" not in updated
