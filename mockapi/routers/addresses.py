from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.address_service import AddressService

router = APIRouter(prefix="/addresses", tags=["addresses"])


def _service(request: Request) -> AddressService:
    return AddressService(get_store(request))


@router.get("")
def list_addresses(
    request: Request,
    entity_type: Optional[str] = Query(None, alias="entityType"),
    entity_id: Optional[str] = Query(None, alias="entityId"),
):
    with internal_errors("Failed to get addresses"):
        return _service(request).list_for(entity_type, entity_id)


@router.post("", status_code=201)
def create_address(
    request: Request,
    payload: dict,
    entity_type: Optional[str] = Query(None, alias="entityType"),
    entity_id: Optional[str] = Query(None, alias="entityId"),
):
    with internal_errors("Failed to create address"):
        return _service(request).create(entity_type, entity_id, payload)


@router.get("/{address_id}")
def get_address(address_id: str, request: Request):
    with internal_errors("Failed to get address"):
        return _service(request).get(address_id)


@router.put("/{address_id}", status_code=202)
def update_address(address_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update address"):
        return _service(request).update(address_id, payload)


@router.delete("/{address_id}", status_code=202)
def delete_address(address_id: str, request: Request):
    with internal_errors("Failed to delete address"):
        _service(request).delete(address_id)
    return {"message": "Address deleted successfully."}


@router.put("/{address_id}/favorite")
def set_default_address(address_id: str, request: Request):
    with internal_errors("Failed to set default address"):
        return _service(request).set_default(address_id)
