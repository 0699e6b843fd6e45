"""
/organization/{org_id}/<segment>/... and
/organization/{org_id}/agencies/{agency_id}/<segment>/... for every
ResourceKind. Literal sub-paths (list, create, add) are registered before
the /{item_id} routes so they are not captured as ids.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.organization_resource_service import (
    KINDS,
    OrganizationResourceService,
    ResourceKind,
)

router = APIRouter(prefix="/organization", tags=["organization-resources"])

# segments that also answer on /list and /create
ORG_ALIASES = {"employees", "certifications", "practical-infos"}
AGENCY_SEGMENTS = ("employees", "customers", "sales-people", "suppliers", "prospects")
AGENCY_ASSIGN = {"employees", "customers", "suppliers"}


def _mount_org_routes(segment: str, kind: ResourceKind) -> None:
    base = f"/{{org_id}}/{segment}"
    what = segment.replace("-", " ")

    def _service(request: Request) -> OrganizationResourceService:
        return OrganizationResourceService(get_store(request), kind)

    def list_items(org_id: str, request: Request):
        with internal_errors(f"Failed to get organization {what}"):
            return _service(request).list_for(org_id)

    def list_org_level_items(org_id: str, request: Request):
        with internal_errors(f"Failed to get organization {what}"):
            return _service(request).list_for(org_id, include_agencies=False)

    def create_item(org_id: str, request: Request, payload: dict):
        with internal_errors(f"Failed to create organization {what}"):
            return _service(request).create(org_id, payload)

    def get_item(org_id: str, item_id: str, request: Request):
        with internal_errors(f"Failed to get organization {what}"):
            return _service(request).get(org_id, item_id)

    def update_item(org_id: str, item_id: str, request: Request, payload: dict):
        with internal_errors(f"Failed to update organization {what}"):
            return _service(request).update(org_id, item_id, payload)

    def delete_item(org_id: str, item_id: str, request: Request):
        with internal_errors(f"Failed to delete organization {what}"):
            _service(request).delete(org_id, item_id)
        return {"message": f"{kind.label} deleted."}

    name = segment.replace("-", "_")
    if segment in ORG_ALIASES:
        router.add_api_route(f"{base}/list", list_org_level_items, methods=["GET"], name=f"list_org_{name}_only")
        router.add_api_route(f"{base}/create", create_item, methods=["POST"], status_code=201, name=f"create_org_{name}_alias")
    router.add_api_route(base, list_items, methods=["GET"], name=f"list_org_{name}")
    router.add_api_route(base, create_item, methods=["POST"], status_code=201, name=f"create_org_{name}")
    router.add_api_route(f"{base}/{{item_id}}", get_item, methods=["GET"], name=f"get_org_{name}")
    router.add_api_route(f"{base}/{{item_id}}", update_item, methods=["PUT"], status_code=202, name=f"update_org_{name}")
    router.add_api_route(f"{base}/{{item_id}}", delete_item, methods=["DELETE"], status_code=202, name=f"delete_org_{name}")


def _mount_agency_routes(segment: str, kind: ResourceKind) -> None:
    base = f"/{{org_id}}/agencies/{{agency_id}}/{segment}"
    what = segment.replace("-", " ")

    def _service(request: Request) -> OrganizationResourceService:
        return OrganizationResourceService(get_store(request), kind)

    def list_items(org_id: str, agency_id: str, request: Request):
        with internal_errors(f"Failed to get agency {what}"):
            return _service(request).list_for(org_id, agency_id)

    def create_item(org_id: str, agency_id: str, request: Request, payload: dict):
        with internal_errors(f"Failed to create agency {what}"):
            return _service(request).create(org_id, payload, agency_id)

    def assign_item(org_id: str, agency_id: str, request: Request, payload: dict):
        with internal_errors(f"Failed to add {what} to agency"):
            return _service(request).assign(org_id, agency_id, payload)

    def get_item(org_id: str, agency_id: str, item_id: str, request: Request):
        with internal_errors(f"Failed to get agency {what}"):
            return _service(request).get(org_id, item_id, agency_id)

    def update_item(org_id: str, agency_id: str, item_id: str, request: Request, payload: dict):
        with internal_errors(f"Failed to update agency {what}"):
            return _service(request).update(org_id, item_id, payload, agency_id)

    def delete_item(org_id: str, agency_id: str, item_id: str, request: Request):
        with internal_errors(f"Failed to delete agency {what}"):
            _service(request).delete(org_id, item_id, agency_id)
        return {"message": f"Agency {kind.label.lower()} deleted."}

    name = segment.replace("-", "_")
    if segment == "employees":
        router.add_api_route(f"{base}/list", list_items, methods=["GET"], name=f"list_agency_{name}_alias")
    if segment in AGENCY_ASSIGN:
        router.add_api_route(f"{base}/add", assign_item, methods=["POST"], status_code=201, name=f"assign_agency_{name}")
    router.add_api_route(base, list_items, methods=["GET"], name=f"list_agency_{name}")
    router.add_api_route(base, create_item, methods=["POST"], status_code=201, name=f"create_agency_{name}")
    router.add_api_route(f"{base}/{{item_id}}", get_item, methods=["GET"], name=f"get_agency_{name}")
    router.add_api_route(f"{base}/{{item_id}}", update_item, methods=["PUT"], status_code=202, name=f"update_agency_{name}")
    router.add_api_route(f"{base}/{{item_id}}", delete_item, methods=["DELETE"], status_code=202, name=f"delete_agency_{name}")


for _segment, _kind in KINDS.items():
    _mount_org_routes(_segment, _kind)
for _segment in AGENCY_SEGMENTS:
    _mount_agency_routes(_segment, KINDS[_segment])
