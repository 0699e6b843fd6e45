"""Error types raised by the store/services and mapped to HTTP responses."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, *, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(ApiError):
    """Missing or invalid required field."""

    status_code = 400


class NotFoundError(ApiError):
    """Unknown id, or an id that belongs to another parent entity."""

    status_code = 404


class ConflictError(ApiError):
    """Unique name or link already taken."""

    status_code = 409


class InternalError(ApiError):
    status_code = 500


class StorageError(InternalError):
    """Reading or writing a collection file failed."""


@contextmanager
def internal_errors(message: str) -> Iterator[None]:
    """
    Wrap a handler body so anything that is not an ApiError becomes an
    InternalError carrying the endpoint's failure message.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise InternalError(message, detail=str(exc)) from exc


def error_body(err: ApiError) -> dict:
    body = {"message": err.message}
    if err.detail:
        body["error"] = err.detail
    return body
