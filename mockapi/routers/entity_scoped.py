"""
Addresses and contacts addressed through their owner:
/{entity_type}/{entity_id}/addresses/... and /{entity_type}/{entity_id}/contacts/...

A record that exists but belongs to another entity answers 404, same as an
unknown id. This router is included last so literal prefixes win.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.address_service import AddressService
from mockapi.services.contact_service import ContactService

router = APIRouter(tags=["entity-scoped"])


def _addresses(request: Request) -> AddressService:
    return AddressService(get_store(request))


def _contacts(request: Request) -> ContactService:
    return ContactService(get_store(request))


# -------------------------- addresses --------------------------
@router.get("/{entity_type}/{entity_id}/addresses")
def list_entity_addresses(entity_type: str, entity_id: str, request: Request):
    with internal_errors("Failed to get addresses"):
        return _addresses(request).list_for(entity_type, entity_id)


@router.post("/{entity_type}/{entity_id}/addresses", status_code=201)
def create_entity_address(entity_type: str, entity_id: str, request: Request, payload: dict):
    with internal_errors("Failed to create address"):
        return _addresses(request).create(entity_type, entity_id, payload, require_country=True)


@router.get("/{entity_type}/{entity_id}/addresses/{address_id}")
def get_entity_address(entity_type: str, entity_id: str, address_id: str, request: Request):
    with internal_errors("Failed to get address"):
        return _addresses(request).get(address_id, scope=(entity_type, entity_id))


@router.put("/{entity_type}/{entity_id}/addresses/{address_id}", status_code=202)
def update_entity_address(entity_type: str, entity_id: str, address_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update address"):
        return _addresses(request).update(address_id, payload, scope=(entity_type, entity_id))


@router.delete("/{entity_type}/{entity_id}/addresses/{address_id}", status_code=202)
def delete_entity_address(entity_type: str, entity_id: str, address_id: str, request: Request):
    with internal_errors("Failed to delete address"):
        _addresses(request).delete(address_id, scope=(entity_type, entity_id))
    return {"message": "Address deleted successfully."}


@router.put("/{entity_type}/{entity_id}/addresses/{address_id}/favorite")
def set_default_entity_address(entity_type: str, entity_id: str, address_id: str, request: Request):
    with internal_errors("Failed to set default address"):
        return _addresses(request).set_default(address_id, scope=(entity_type, entity_id))


# -------------------------- contacts --------------------------
@router.get("/{entity_type}/{entity_id}/contacts")
def list_entity_contacts(entity_type: str, entity_id: str, request: Request):
    with internal_errors("Failed to get contacts"):
        return _contacts(request).list_for(entity_type, entity_id)


@router.post("/{entity_type}/{entity_id}/contacts", status_code=201)
def create_entity_contact(entity_type: str, entity_id: str, request: Request, payload: dict):
    with internal_errors("Failed to create contact"):
        return _contacts(request).create(entity_type, entity_id, payload, require_names=True)


@router.get("/{entity_type}/{entity_id}/contacts/{contact_id}")
def get_entity_contact(entity_type: str, entity_id: str, contact_id: str, request: Request):
    with internal_errors("Failed to get contact"):
        return _contacts(request).get(contact_id, scope=(entity_type, entity_id))


@router.put("/{entity_type}/{entity_id}/contacts/{contact_id}", status_code=202)
def update_entity_contact(entity_type: str, entity_id: str, contact_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update contact"):
        return _contacts(request).update(contact_id, payload, scope=(entity_type, entity_id))


@router.delete("/{entity_type}/{entity_id}/contacts/{contact_id}", status_code=202)
def delete_entity_contact(entity_type: str, entity_id: str, contact_id: str, request: Request):
    with internal_errors("Failed to delete contact"):
        _contacts(request).delete(contact_id, scope=(entity_type, entity_id))
    return {"message": "Contact deleted successfully."}


@router.put("/{entity_type}/{entity_id}/contacts/{contact_id}/favorite")
def toggle_favorite_entity_contact(entity_type: str, entity_id: str, contact_id: str, request: Request):
    with internal_errors("Failed to toggle favorite contact"):
        return _contacts(request).toggle_favorite(contact_id, scope=(entity_type, entity_id))
