"""API endpoints for list-integration mappings."""

from masterdata.api.crud_router import build_crud_router
from masterdata.schemas.list_integration_mapping import (
    ListIntegrationMappingCreate,
    ListIntegrationMappingFilter,
    ListIntegrationMappingUpdate,
)
from masterdata.services.list_integration_mapping_service import (
    get_list_integration_mapping_service,
)

router = build_crud_router(
    "list integration mapping",
    get_list_integration_mapping_service,
    create_schema=ListIntegrationMappingCreate,
    update_schema=ListIntegrationMappingUpdate,
    filter_schema=ListIntegrationMappingFilter,
)
