"""API endpoints for key-value configuration entries."""

from masterdata.api.crud_router import build_crud_router
from masterdata.schemas.key_value_config import (
    KeyValueConfigCreate,
    KeyValueConfigFilter,
    KeyValueConfigUpdate,
)
from masterdata.services.key_value_config_service import get_key_value_config_service

router = build_crud_router(
    "master data",
    get_key_value_config_service,
    create_schema=KeyValueConfigCreate,
    update_schema=KeyValueConfigUpdate,
    filter_schema=KeyValueConfigFilter,
)
