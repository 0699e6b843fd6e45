from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.organization_service import OrganizationService

router = APIRouter(prefix="/organization", tags=["organizations"])


def _service(request: Request) -> OrganizationService:
    return OrganizationService(get_store(request))


# literal paths first: /all, /create, /user-orgs and /domain/... must not reach /{org_id}
@router.get("/all")
def list_organizations(request: Request):
    with internal_errors("Failed to get organizations"):
        return _service(request).list_all()


@router.get("/user-orgs")
def list_user_organizations(request: Request):
    # no session layer: every organization belongs to the caller
    with internal_errors("Failed to get user organizations"):
        return _service(request).list_all()


@router.post("/create", status_code=201)
def create_organization(request: Request, payload: dict):
    with internal_errors("Failed to create organization"):
        return _service(request).create(payload)


@router.get("/domain/{domain_id}")
def list_organizations_by_domain(domain_id: str, request: Request):
    with internal_errors("Failed to get organizations by domain"):
        return _service(request).list_by_domain(domain_id)


@router.get("/{org_id}")
def get_organization(org_id: str, request: Request):
    with internal_errors("Failed to get organization details"):
        return _service(request).get(org_id)


@router.get("/{org_id}/details")
def get_organization_details(org_id: str, request: Request):
    with internal_errors("Failed to get organization details"):
        return _service(request).get(org_id)


@router.put("/{org_id}", status_code=202)
def update_organization(org_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update organization"):
        return _service(request).update(org_id, payload)


@router.put("/{org_id}/update", status_code=202)
def update_organization_alias(org_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update organization"):
        return _service(request).update(org_id, payload)


@router.delete("/{org_id}", status_code=202)
def delete_organization(org_id: str, request: Request):
    with internal_errors("Failed to delete organization"):
        _service(request).delete(org_id)
    return {"message": "Organization deleted successfully."}


@router.delete("/{org_id}/delete", status_code=202)
def delete_organization_alias(org_id: str, request: Request):
    with internal_errors("Failed to delete organization"):
        _service(request).delete(org_id)
    return {"message": "Organization deleted successfully."}


@router.put("/{org_id}/status")
def update_organization_status(org_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update organization status"):
        return _service(request).update_status(org_id, payload)


@router.put("/{org_id}/domains/{domain_id}/add", status_code=202)
def add_organization_domain(org_id: str, domain_id: str, request: Request):
    with internal_errors("Failed to add business domain."):
        return _service(request).add_domain(org_id, domain_id)


@router.delete("/{org_id}/domains/{domain_id}/remove", status_code=202)
def remove_organization_domain(org_id: str, domain_id: str, request: Request):
    with internal_errors("Failed to remove business domain."):
        return _service(request).remove_domain(org_id, domain_id)


# -------------------------- agencies --------------------------
@router.get("/{org_id}/agencies")
def list_agencies(org_id: str, request: Request, active: Optional[bool] = None):
    with internal_errors("Failed to get agencies"):
        return _service(request).list_agencies(org_id, active)


@router.post("/{org_id}/agencies", status_code=201)
def create_agency(org_id: str, request: Request, payload: dict):
    with internal_errors("Failed to create agency"):
        return _service(request).create_agency(org_id, payload)


@router.get("/{org_id}/agencies/{agency_id}")
def get_agency(org_id: str, agency_id: str, request: Request):
    with internal_errors("Failed to get agency"):
        return _service(request).get_agency(org_id, agency_id)


@router.put("/{org_id}/agencies/{agency_id}", status_code=202)
def update_agency(org_id: str, agency_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update agency"):
        return _service(request).update_agency(org_id, agency_id, payload)


@router.delete("/{org_id}/agencies/{agency_id}", status_code=202)
def delete_agency(org_id: str, agency_id: str, request: Request):
    with internal_errors("Failed to delete agency"):
        _service(request).delete_agency(org_id, agency_id)
    return {"message": "Agency deleted successfully."}


@router.put("/{org_id}/agencies/{agency_id}/status", status_code=202)
def update_agency_status(org_id: str, agency_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update agency status"):
        return _service(request).set_agency_status(org_id, agency_id, payload)


# -------------------------- third parties --------------------------
@router.get("/{org_id}/third-parties")
def list_third_parties(
    org_id: str,
    request: Request,
    status: Optional[bool] = None,
    type_: Optional[str] = Query(None, alias="type"),
    page: Optional[int] = None,
    size: Optional[int] = None,
):
    with internal_errors("Failed to get third parties"):
        return _service(request).list_third_parties(org_id, status=status, type_=type_, page=page, size=size)


@router.post("/{org_id}/third-parties/create", status_code=201)
def create_third_party(org_id: str, request: Request, payload: dict):
    with internal_errors("Failed to create third party"):
        return _service(request).create_third_party(org_id, payload)


@router.get("/{org_id}/third-parties/details/{third_party_id}")
def get_third_party_details(org_id: str, third_party_id: str, request: Request):
    with internal_errors("Failed to get third party"):
        return _service(request).get_third_party(org_id, third_party_id)


@router.put("/{org_id}/third-parties/details/{third_party_id}", status_code=202)
def update_third_party_details(org_id: str, third_party_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update third party"):
        return _service(request).update_third_party(org_id, third_party_id, payload)


@router.delete("/{org_id}/third-parties/details/{third_party_id}", status_code=202)
def delete_third_party_details(org_id: str, third_party_id: str, request: Request):
    with internal_errors("Failed to delete third party"):
        _service(request).delete_third_party(org_id, third_party_id)
    return {"message": "Third party deleted."}


@router.put("/{org_id}/third-parties/details/{third_party_id}/status", status_code=202)
def set_third_party_active(org_id: str, third_party_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update third party status"):
        return _service(request).set_third_party_active(org_id, third_party_id, payload)


@router.post("/{org_id}/third-parties/{third_party_type}", status_code=201)
def create_typed_third_party(org_id: str, third_party_type: str, request: Request, payload: dict):
    with internal_errors("Failed to create third party"):
        return _service(request).create_third_party(org_id, payload, type_=third_party_type)


@router.get("/{org_id}/third-parties/{third_party_id}")
def get_third_party(org_id: str, third_party_id: str, request: Request):
    with internal_errors("Failed to get third party"):
        return _service(request).get_third_party(org_id, third_party_id)


@router.put("/{org_id}/third-parties/{third_party_id}", status_code=202)
def update_third_party(org_id: str, third_party_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update third party"):
        return _service(request).update_third_party(org_id, third_party_id, payload)


@router.delete("/{org_id}/third-parties/{third_party_id}", status_code=202)
def delete_third_party(org_id: str, third_party_id: str, request: Request):
    with internal_errors("Failed to delete third party"):
        _service(request).delete_third_party(org_id, third_party_id)
    return {"message": "Third party deleted."}


@router.put("/{org_id}/third-parties/{third_party_id}/status", status_code=202)
def update_third_party_status(org_id: str, third_party_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update third party status"):
        return _service(request).set_third_party_status(org_id, third_party_id, payload)
