from __future__ import annotations

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.business_actor_service import BusinessActorService

router = APIRouter(prefix="/business-actors", tags=["business-actors"])


def _service(request: Request) -> BusinessActorService:
    return BusinessActorService(get_store(request))


@router.get("")
def list_business_actors(request: Request):
    with internal_errors("Failed to get business actors"):
        return _service(request).list_all()


@router.post("", status_code=201)
def create_business_actor(request: Request, payload: dict):
    with internal_errors("Failed to create business actor"):
        return _service(request).create(payload)


@router.get("/type/{actor_type}")
def list_business_actors_by_type(actor_type: str, request: Request):
    with internal_errors("Failed to get business actors by type"):
        return _service(request).list_by_type(actor_type)


@router.get("/{actor_id}")
def get_business_actor(actor_id: str, request: Request):
    with internal_errors("Failed to get business actor"):
        return _service(request).get(actor_id)


@router.put("/{actor_id}", status_code=202)
def update_business_actor(actor_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update business actor"):
        return _service(request).update(actor_id, payload)


@router.delete("/{actor_id}", status_code=202)
def delete_business_actor(actor_id: str, request: Request):
    with internal_errors("Failed to delete business actor"):
        _service(request).delete(actor_id)
    return {"message": "Deleted"}
