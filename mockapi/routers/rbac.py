from __future__ import annotations

from fastapi import APIRouter, Body, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.rbac_service import RbacService

router = APIRouter(prefix="/auth", tags=["rbac"])


def _service(request: Request) -> RbacService:
    return RbacService(get_store(request))


# -------------------------- roles --------------------------
@router.get("/roles")
def list_roles(request: Request):
    with internal_errors("Failed to get roles."):
        return _service(request).list_roles()


@router.post("/roles", status_code=201)
def create_role(request: Request, payload: dict):
    with internal_errors("Failed to create role."):
        return _service(request).create_role(payload)


@router.get("/roles/hierarchy")
def get_roles_hierarchy(request: Request):
    with internal_errors("Failed to get roles hierarchy."):
        return _service(request).hierarchy()


@router.put("/roles/{role_id}")
def update_role(role_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update role."):
        return _service(request).update_role(role_id, payload)


@router.delete("/roles/{role_id}")
def delete_role(role_id: str, request: Request):
    with internal_errors("Failed to delete role."):
        _service(request).delete_role(role_id)
    return {"message": "Role deleted successfully."}


@router.get("/roles/{role_id}/permissions")
def list_role_permissions(role_id: str, request: Request):
    with internal_errors("Failed to get role permissions."):
        return _service(request).role_permissions(role_id)


@router.post("/roles/{role_id}/permissions")
def assign_role_permissions(role_id: str, request: Request, permission_ids: list[str] = Body(...)):
    with internal_errors("Failed to assign permissions."):
        return _service(request).assign_permissions(role_id, permission_ids)


@router.delete("/roles/{role_id}/permissions")
def remove_role_permissions(role_id: str, request: Request, permission_ids: list[str] = Body(...)):
    with internal_errors("Failed to remove permissions."):
        removed = _service(request).remove_permissions(role_id, permission_ids)
    if removed:
        return {"message": "Permissions removed successfully."}
    return {"message": "No matching permissions found to remove or already removed."}


@router.post("/roles/{role_id}/permissions/{permission_id}")
def assign_role_permission(role_id: str, permission_id: str, request: Request):
    with internal_errors("Failed to assign permission."):
        return _service(request).assign_permission(role_id, permission_id)


@router.delete("/roles/{role_id}/permissions/{permission_id}")
def remove_role_permission(role_id: str, permission_id: str, request: Request):
    with internal_errors("Failed to remove permission."):
        _service(request).remove_permission(role_id, permission_id)
    return {"message": "Permission removed successfully."}


# -------------------------- permissions --------------------------
@router.get("/permissions")
def list_permissions(request: Request):
    with internal_errors("Failed to get permissions."):
        return _service(request).list_permissions()


@router.post("/permissions")
def create_permission(request: Request, payload: dict):
    with internal_errors("Failed to create permission."):
        return _service(request).create_permission(payload)


@router.get("/permissions/{permission_id}")
def get_permission(permission_id: str, request: Request):
    with internal_errors("Failed to get permission."):
        return _service(request).get_permission(permission_id)


@router.put("/permissions/{permission_id}")
def update_permission(permission_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update permission."):
        return _service(request).update_permission(permission_id, payload)


@router.delete("/permissions/{permission_id}")
def delete_permission(permission_id: str, request: Request):
    with internal_errors("Failed to delete permission."):
        _service(request).delete_permission(permission_id)
    return {"message": "Permission deleted successfully."}


# -------------------------- resources --------------------------
@router.post("/resources/save")
def save_rbac_resource(request: Request, payload: dict):
    with internal_errors("Failed to save RBAC resource."):
        _service(request).save_resource(payload)
    return {"status": "SUCCESS", "message": "RBAC Resource saved successfully.", "data": True, "ok": True}
