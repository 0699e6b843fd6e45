from __future__ import annotations

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.preferences_service import PreferencesService
from mockapi.services.user_service import UserService

router = APIRouter(tags=["users"])


def _users(request: Request) -> UserService:
    return UserService(get_store(request))


@router.get("/auth/users")
def list_users(request: Request):
    with internal_errors("Failed to get users."):
        return _users(request).list_users()


@router.get("/auth/users/username/{username}")
def get_user_by_username(username: str, request: Request):
    with internal_errors("Failed to get user by username."):
        return _users(request).get_by_username(username)


@router.get("/auth/users/email/{email}")
def get_user_by_email(email: str, request: Request):
    with internal_errors("Failed to get user by email."):
        return _users(request).get_by_email(email)


@router.get("/auth/users/phone/{phone_number}")
def get_user_by_phone(phone_number: str, request: Request):
    with internal_errors("Failed to get user by phone number."):
        return _users(request).get_by_phone(phone_number)


@router.get("/auth/users/{user_id}")
def get_user(user_id: str, request: Request):
    with internal_errors("Failed to get user."):
        return _users(request).get_by_id(user_id)


@router.get("/user-preferences/{user_id}")
def get_preferences(user_id: str, request: Request):
    with internal_errors("Failed to get user preferences."):
        return PreferencesService(get_store(request)).get_or_create(user_id)


@router.put("/user-preferences/{user_id}")
def update_preferences(user_id: str, request: Request, payload: dict):
    with internal_errors("Failed to update user preferences."):
        return PreferencesService(get_store(request)).update(user_id, payload)
