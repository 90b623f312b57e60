"""API endpoints for item categories."""

from masterdata.api.crud_router import build_crud_router
from masterdata.schemas.item_category import (
    ItemCategoryCreate,
    ItemCategoryFilter,
    ItemCategoryUpdate,
)
from masterdata.services.item_category_service import get_item_category_service

router = build_crud_router(
    "item category",
    get_item_category_service,
    create_schema=ItemCategoryCreate,
    update_schema=ItemCategoryUpdate,
    filter_schema=ItemCategoryFilter,
)
