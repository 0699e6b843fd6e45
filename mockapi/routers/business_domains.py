from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.business_domain_service import BusinessDomainService

router = APIRouter(prefix="/business-domains", tags=["business-domains"])


def _service(request: Request) -> BusinessDomainService:
    return BusinessDomainService(get_store(request))


@router.get("")
@router.get("/list")
def list_business_domains(
    request: Request,
    organization_id: Optional[str] = None,
    parent_domain_id: Optional[str] = None,
    name: Optional[str] = None,
    page: Optional[int] = None,
    size: Optional[int] = None,
):
    with internal_errors("Failed to get business domains"):
        return _service(request).search(
            organization_id=organization_id,
            parent_domain_id=parent_domain_id,
            name=name,
            page=page,
            size=size,
        )


@router.post("", status_code=201)
@router.post("/create", status_code=201)
def create_business_domain(request: Request, payload: dict):
    with internal_errors("Failed to create business domain"):
        return _service(request).create(payload)


@router.get("/{domain_id}")
def get_business_domain(domain_id: str, request: Request):
    with internal_errors("Failed to get business domain"):
        return _service(request).get(domain_id)


@router.put("/{domain_id}", status_code=202)
def update_business_domain(domain_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update business domain"):
        return _service(request).update(domain_id, payload)


@router.delete("/{domain_id}", status_code=202)
def delete_business_domain(domain_id: str, request: Request):
    with internal_errors("Failed to delete business domain"):
        _service(request).delete(domain_id)
    return {"message": "Business domain deleted."}
