"""API endpoints for integrations."""

from masterdata.api.crud_router import build_crud_router
from masterdata.schemas.integration import IntegrationCreate, IntegrationFilter, IntegrationUpdate
from masterdata.services.integration_service import get_integration_service

router = build_crud_router(
    "integration",
    get_integration_service,
    create_schema=IntegrationCreate,
    update_schema=IntegrationUpdate,
    filter_schema=IntegrationFilter,
)
