"""
Roles, permissions and the role/permission links of the mock auth layer.

Links live in their own collection as ``{role_id, permission_id}`` records;
deleting a role or a permission drops its links as well.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from mockapi.core.errors import ConflictError, NotFoundError, ValidationError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService, require_fields

ROLES = "authRoles"
PERMISSIONS = "authPermissions"
ROLE_PERMISSIONS = "authRolePermissions"
RESOURCES = "authRbacResources"

# served as-is; roles carry no parent field to derive it from
ROLE_HIERARCHY = "ADMIN_ROLE > (MANAGER_ROLE > (STAFF_ROLE, USER_ROLE)); GUEST_ROLE"


class RbacService(CollectionService):
    collection = ROLES

    # -------------------------- roles --------------------------
    def list_roles(self) -> list[Record]:
        return list(self.store.get_collection(ROLES))

    def create_role(self, body: Mapping[str, Any]) -> Record:
        require_fields(body, ("name",), "Role name is required.")
        with self.store.locked(ROLES):
            if any(r.get("name") == body["name"] for r in self.store.get_collection(ROLES)):
                raise ConflictError("Role with this name already exists.")
            return self.store.add_item(ROLES, {"name": body["name"], "description": body.get("description")})

    def update_role(self, role_id: str, body: Mapping[str, Any]) -> Record:
        updated = self.store.update_item(ROLES, role_id, body)
        if updated is None:
            raise NotFoundError(f"Role with ID {role_id} not found.")
        return updated

    def delete_role(self, role_id: str) -> None:
        deleted = self.store.delete_item(ROLES, role_id)
        self._drop_links(lambda link: link.get("role_id") == role_id)
        if not deleted:
            raise NotFoundError(f"Role with ID {role_id} not found.")

    def hierarchy(self) -> str:
        return ROLE_HIERARCHY

    # -------------------------- permissions --------------------------
    def list_permissions(self) -> list[Record]:
        return list(self.store.get_collection(PERMISSIONS))

    def create_permission(self, body: Mapping[str, Any]) -> Record:
        require_fields(
            body, ("name", "resource_id", "operation_id"), "Name, resource ID, and operation ID are required."
        )
        return self.store.add_item(PERMISSIONS, body)

    def get_permission(self, permission_id: str) -> Record:
        permission = self.store.get_item_by_id(PERMISSIONS, permission_id)
        if permission is None:
            raise NotFoundError(f"Permission with ID {permission_id} not found.")
        return permission

    def update_permission(self, permission_id: str, body: Mapping[str, Any]) -> Record:
        updated = self.store.update_item(PERMISSIONS, permission_id, body)
        if updated is None:
            raise NotFoundError(f"Permission with ID {permission_id} not found.")
        return updated

    def delete_permission(self, permission_id: str) -> None:
        deleted = self.store.delete_item(PERMISSIONS, permission_id)
        self._drop_links(lambda link: link.get("permission_id") == permission_id)
        if not deleted:
            raise NotFoundError(f"Permission with ID {permission_id} not found.")

    # -------------------------- role/permission links --------------------------
    def role_permissions(self, role_id: str) -> list[Record]:
        return [link for link in self.store.get_collection(ROLE_PERMISSIONS) if link.get("role_id") == role_id]

    def assign_permissions(self, role_id: str, permission_ids: Iterable[str]) -> list[Record]:
        """Link every id not linked yet; returns only the new links."""
        added: list[Record] = []
        with self.store.locked(ROLE_PERMISSIONS):
            linked = {link.get("permission_id") for link in self.role_permissions(role_id)}
            for permission_id in permission_ids:
                if permission_id in linked:
                    continue
                added.append(
                    self.store.add_item(ROLE_PERMISSIONS, {"role_id": role_id, "permission_id": permission_id})
                )
                linked.add(permission_id)
        return added

    def remove_permissions(self, role_id: str, permission_ids: Iterable[str]) -> int:
        targets = set(permission_ids)
        return self._drop_links(lambda link: link.get("role_id") == role_id and link.get("permission_id") in targets)

    def assign_permission(self, role_id: str, permission_id: str) -> Record:
        with self.store.locked(ROLE_PERMISSIONS):
            if any(link.get("permission_id") == permission_id for link in self.role_permissions(role_id)):
                raise ConflictError("Permission already assigned to this role.")
            return self.store.add_item(ROLE_PERMISSIONS, {"role_id": role_id, "permission_id": permission_id})

    def remove_permission(self, role_id: str, permission_id: str) -> None:
        removed = self._drop_links(
            lambda link: link.get("role_id") == role_id and link.get("permission_id") == permission_id
        )
        if not removed:
            raise NotFoundError("Permission not found for this role or already removed.")

    def _drop_links(self, predicate) -> int:
        with self.store.locked(ROLE_PERMISSIONS):
            links = self.store.get_collection(ROLE_PERMISSIONS)
            kept = [link for link in links if not predicate(link)]
            removed = len(links) - len(kept)
            if removed:
                self.store.save_collection(ROLE_PERMISSIONS, kept)
            return removed

    # -------------------------- resources --------------------------
    def save_resource(self, body: Mapping[str, Any]) -> Record:
        if any(not body.get(f) for f in ("name", "value", "service")):
            raise ValidationError("Name, value, and service are required for RBAC resource.")
        return self.store.add_item(RESOURCES, body)
