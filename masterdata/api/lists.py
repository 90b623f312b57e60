"""API endpoints for lists."""

from masterdata.api.crud_router import build_crud_router
from masterdata.schemas.list import ListCreate, ListFilter, ListUpdate
from masterdata.services.list_service import get_list_service

router = build_crud_router(
    "list",
    get_list_service,
    create_schema=ListCreate,
    update_schema=ListUpdate,
    filter_schema=ListFilter,
)
