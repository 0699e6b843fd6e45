"""
Organization image metadata. No bytes are stored: an upload records one
descriptor per image (name, size, fileType) under the organization.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from mockapi.core.errors import NotFoundError, ValidationError
from mockapi.repositories.json_storage import Record
from mockapi.services.base import CollectionService

# recorded when an upload carries no descriptors
PLACEHOLDER_IMAGES = (
    {"name": "uploaded_image1.jpg", "size": 102400, "fileType": "image/jpeg"},
    {"name": "another_one.png", "size": 204800, "fileType": "image/png"},
)


class ImageService(CollectionService):
    collection = "organizationImages"

    def add_images(self, org_id: str, body: Optional[Mapping[str, Any]] = None) -> list[Record]:
        images = (body or {}).get("images") or PLACEHOLDER_IMAGES
        if not isinstance(images, (list, tuple)) or not all(isinstance(i, dict) for i in images):
            raise ValidationError("Field 'images' must be a list of objects.")
        with self.store.locked(self.collection):
            return [self.store.add_item(self.collection, {**image, "organization_id": org_id}) for image in images]

    def get(self, image_id: str) -> Record:
        image = self.store.get_item_by_id(self.collection, image_id)
        if image is None:
            raise NotFoundError(f"Image with ID {image_id} not found.")
        return image
