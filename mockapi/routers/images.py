from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request

from mockapi.core.errors import internal_errors
from mockapi.routers.deps import get_store
from mockapi.services.image_service import ImageService

router = APIRouter(prefix="/images", tags=["images"])


def _service(request: Request) -> ImageService:
    return ImageService(get_store(request))


@router.get("/details/{image_id}")
def get_image_details(image_id: str, request: Request):
    with internal_errors("Failed to get image details"):
        return _service(request).get(image_id)


@router.put("/{org_id}/add")
def add_organization_images(org_id: str, request: Request, payload: Optional[dict] = None):
    with internal_errors("Failed to upload images."):
        return _service(request).add_images(org_id, payload)
