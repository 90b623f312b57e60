"""Router factory exposing a ``CrudService`` over HTTP.

Handlers are thin adapters: they hand the validated body to the service and
write the envelope's ``data`` back with the envelope's ``status``.
"""

import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from masterdata.schemas.common import ServiceResult
from masterdata.services.crud_service import CrudService

logger = logging.getLogger(__name__)


def render(result: ServiceResult) -> Response:
    """Write a service result as the HTTP response."""
    if isinstance(result.data, str):
        return PlainTextResponse(result.data, status_code=result.status)
    return JSONResponse(jsonable_encoder(result.data), status_code=result.status)


async def _respond(
    label: str,
    operation: str,
    call: Callable[[], Awaitable[ServiceResult]],
) -> Response:
    logger.info(f"{operation} {label}")
    try:
        result = await call()
    except Exception as exc:
        logger.error(f"{operation} {label} failed: {exc}")
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info(f"{operation} {label} successfully: status={result.status}")
    return render(result)


def build_crud_router(
    label: str,
    get_service: Callable[[], CrudService],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    filter_schema: type[BaseModel],
) -> APIRouter:
    """Build the create / search / get / update / delete routes for one resource."""
    router = APIRouter()

    @router.post("/", status_code=status.HTTP_201_CREATED, summary=f"Create {label}")
    async def create(
        payload: create_schema,
        service: CrudService = Depends(get_service),
    ):
        return await _respond(label, "create", lambda: service.create(payload))

    @router.post("/all", summary=f"Search {label}")
    async def find_all(
        filters: filter_schema | None = None,
        service: CrudService = Depends(get_service),
    ):
        filters = filters or filter_schema()
        return await _respond(label, "find all", lambda: service.find_all(filters))

    @router.get("/{record_id}", summary=f"Get {label} by id")
    async def find_unique(
        record_id: str,
        service: CrudService = Depends(get_service),
    ):
        return await _respond(label, "find unique", lambda: service.find_unique(record_id))

    @router.put("/{record_id}", summary=f"Update {label}")
    async def update(
        record_id: str,
        payload: update_schema,
        service: CrudService = Depends(get_service),
    ):
        return await _respond(label, "update", lambda: service.update(record_id, payload))

    @router.delete("/{record_id}", summary=f"Delete {label}")
    async def delete(
        record_id: str,
        service: CrudService = Depends(get_service),
    ):
        return await _respond(label, "delete", lambda: service.delete(record_id))

    return router
