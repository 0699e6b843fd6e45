"""
Per-user dashboard preferences.

Preferences are keyed by ``user_id`` and split into three sections
(display, notifications, privacy). A user without stored preferences gets
the defaults below, persisted on first access. Updates merge each section
separately so a PUT carrying only ``{"display": {"theme": "dark"}}`` keeps
every other preference.
"""
from __future__ import annotations

import copy
from typing import Any, Mapping

from mockapi.core.errors import ValidationError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService

SECTIONS = ("display", "notifications", "privacy")

DEFAULT_PREFERENCES: dict[str, dict[str, Any]] = {
    "display": {
        "language": "en",
        "currency": "USD",
        "dateFormat": "mm-dd-yyyy",
        "fontSize": 16,
        "theme": "system",
        "layout": "default",
        "timezone": "utc-8",
        "profilePhotoUrl": "",
    },
    "notifications": {
        "email": True,
        "push": True,
        "sms": False,
        "accountActivity": True,
        "newFeatures": True,
        "marketing": False,
        "frequency": "daily",
        "quietHoursStart": "22:00",
        "quietHoursEnd": "07:00",
    },
    "privacy": {
        "analyticsSharing": True,
        "personalizedAds": False,
        "visibility": "private",
        "dataRetention": "1-year",
    },
}


class PreferencesService(CollectionService):
    collection = "userPreferences"

    def get_or_create(self, user_id: str) -> Record:
        if not user_id:
            raise ValidationError("User ID is required.")
        with self.store.locked(self.collection):
            prefs = self.store.get_item_by_id(self.collection, user_id)
            if prefs is None:
                prefs = self.store.add_item(self.collection, {"user_id": user_id, **copy.deepcopy(DEFAULT_PREFERENCES)})
            return prefs

    def update(self, user_id: str, body: Mapping[str, Any]) -> Record:
        if not user_id:
            raise ValidationError("User ID is required.")
        for section in SECTIONS:
            if body.get(section) is not None and not isinstance(body[section], dict):
                raise ValidationError(f"Field '{section}' must be an object.")
        with self.store.locked(self.collection):
            current = self.get_or_create(user_id)
            merged = {
                section: {**(current.get(section) or {}), **(body.get(section) or {})}
                for section in SECTIONS
            }
            return self.store.update_item(self.collection, user_id, merged)
