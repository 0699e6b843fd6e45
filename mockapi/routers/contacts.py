from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.contact_service import ContactService

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _service(request: Request) -> ContactService:
    return ContactService(get_store(request))


@router.get("")
def list_contacts(
    request: Request,
    entity_type: Optional[str] = Query(None, alias="entityType"),
    entity_id: Optional[str] = Query(None, alias="entityId"),
):
    with internal_errors("Failed to get contacts"):
        return _service(request).list_for(entity_type, entity_id)


@router.post("", status_code=201)
def create_contact(
    request: Request,
    payload: dict,
    entity_type: Optional[str] = Query(None, alias="entityType"),
    entity_id: Optional[str] = Query(None, alias="entityId"),
):
    with internal_errors("Failed to create contact"):
        return _service(request).create(entity_type, entity_id, payload)


@router.get("/{contact_id}")
def get_contact(contact_id: str, request: Request):
    with internal_errors("Failed to get contact"):
        return _service(request).get(contact_id)


@router.put("/{contact_id}", status_code=202)
def update_contact(contact_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update contact"):
        return _service(request).update(contact_id, payload)


@router.delete("/{contact_id}", status_code=202)
def delete_contact(contact_id: str, request: Request):
    with internal_errors("Failed to delete contact"):
        _service(request).delete(contact_id)
    return {"message": "Contact deleted successfully."}


@router.put("/{contact_id}/favorite")
def toggle_favorite_contact(contact_id: str, request: Request):
    with internal_errors("Failed to toggle favorite contact"):
        return _service(request).toggle_favorite(contact_id)
