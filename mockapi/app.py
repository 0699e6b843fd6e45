"""FastAPI application for the dashboard mock API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mockapi.core.config import Settings, get_settings
from mockapi.core.errors import ApiError, error_body
from mockapi.core.logging_config import configure_logging
from mockapi.repositories.json_storage import CollectionStore
from mockapi.routers import addresses as addresses_router
from mockapi.routers import applications as applications_router
from mockapi.routers import business_actors as business_actors_router
from mockapi.routers import business_domains as business_domains_router
from mockapi.routers import contacts as contacts_router
from mockapi.routers import entity_scoped as entity_scoped_router
from mockapi.routers import images as images_router
from mockapi.routers import organization_resources as organization_resources_router
from mockapi.routers import organizations as organizations_router
from mockapi.routers import rbac as rbac_router
from mockapi.routers import users as users_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/mock"


def _cors_origins(settings: Settings) -> list[str]:
    allowed = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed.update(
            {
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://localhost:8000",
                "http://127.0.0.1:8000",
            }
        )
    return sorted(origin for origin in allowed if origin)


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(error_body(exc), status_code=exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    return JSONResponse({"message": f"Invalid request. {problems}".strip()}, status_code=400)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"message": "Internal server error", "error": str(exc)}, status_code=500)


def create_app(settings: Optional[Settings] = None, store: Optional[CollectionStore] = None) -> FastAPI:
    """Build the app. Uvicorn/gunicorn use mockapi.app_factory:app."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = store or CollectionStore(settings.data_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.preload_collections:
            store.load()
            logger.info("Preloaded collections from %s", store.data_dir)
        yield
        store.flush()

    app = FastAPI(title="Dashboard Mock API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    origins = _cors_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(addresses_router.router, prefix=API_PREFIX)
    app.include_router(contacts_router.router, prefix=API_PREFIX)
    app.include_router(applications_router.router, prefix=API_PREFIX)
    app.include_router(business_domains_router.router, prefix=API_PREFIX)
    app.include_router(business_actors_router.router, prefix=API_PREFIX)
    app.include_router(users_router.router, prefix=API_PREFIX)
    app.include_router(rbac_router.router, prefix=API_PREFIX)
    app.include_router(images_router.router, prefix=API_PREFIX)
    # /organization/all, /create, /domain/... before the generic sub-resources
    app.include_router(organizations_router.router, prefix=API_PREFIX)
    app.include_router(organization_resources_router.router, prefix=API_PREFIX)
    # catch-all /{entity_type}/{entity_id}/... patterns go last
    app.include_router(entity_scoped_router.router, prefix=API_PREFIX)

    logger.info("Mock API ready (env=%s, data_dir=%s)", settings.app_env, settings.data_dir)
    return app
