from __future__ import annotations

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.application_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])


def _service(request: Request) -> ApplicationService:
    return ApplicationService(get_store(request))


@router.get("")
def list_applications(request: Request):
    with internal_errors("Failed to get applications"):
        return _service(request).list_all()


@router.post("")
def create_application(request: Request, payload: dict):
    with internal_errors("Failed to create application"):
        return _service(request).create(payload)


@router.get("/{application_id}/keys")
def list_application_keys(application_id: str, request: Request):
    with internal_errors("Failed to get application keys"):
        return _service(request).list_keys(application_id)


@router.post("/{application_id}/keys/create")
def create_application_key(application_id: str, request: Request):
    with internal_errors("Failed to create application key"):
        return _service(request).create_key(application_id)
