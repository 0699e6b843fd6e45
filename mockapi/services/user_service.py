"""Read-only lookups over the mock auth users (password hashes never leave)."""
from __future__ import annotations

from mockapi.core.errors import NotFoundError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService

SENSITIVE_FIELDS = ("password_hash",)


def public_user(user: Record) -> Record:
    return {k: v for k, v in user.items() if k not in SENSITIVE_FIELDS}


class UserService(CollectionService):
    collection = "authUsers"

    def list_users(self) -> list[Record]:
        return [public_user(u) for u in self.store.get_collection(self.collection)]

    def get_by_id(self, user_id: str) -> Record:
        user = self.store.get_item_by_id(self.collection, user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return public_user(user)

    def get_by_username(self, username: str) -> Record:
        return self._get_by("username", username)

    def get_by_email(self, email: str) -> Record:
        return self._get_by("email", email)

    def get_by_phone(self, phone_number: str) -> Record:
        return self._get_by("phone_number", phone_number, "phone number")

    def _get_by(self, field: str, value: str, label: str = "") -> Record:
        matches = self._filter(**{field: value})
        if not matches:
            raise NotFoundError(f"User with {label or field} {value} not found.")
        return public_user(matches[0])
