"""
Catalog error taxonomy and its HTTP mapping.

Services raise these for write-side failures. Read-side absence is a
plain ``None`` and never one of these. ``register_exception_handlers``
maps each class to its ``status_code`` with a ``{"detail": ...}`` body,
the same shape FastAPI uses for ``HTTPException``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(CatalogError):
    """Caller data breaks a creation precondition (e.g. author id already set)."""

    status_code = 400


class InvalidStateError(CatalogError):
    """An entity the operation needs does not exist."""

    status_code = 400


class IntegrityFaultError(CatalogError):
    """Stored data violates an invariant that client input cannot reach."""

    status_code = 500


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
