"""Service for integrations."""

from masterdata.config import settings
from masterdata.database import async_session_factory
from masterdata.models import Integration
from masterdata.schemas.integration import IntegrationRead
from masterdata.services.crud_service import CrudService, EntityConfig
from masterdata.services.entity_updater import EntityUpdater

INTEGRATION_CONFIG = EntityConfig(
    label="integrations",
    model=Integration,
    id_attribute="integration_id",
    read_schema=IntegrationRead,
    unique_fields=("name",),
    search_fields=("name",),
    order_by=(Integration.popularity.desc(),),
)

# Singleton instance
_integration_service: CrudService | None = None


def get_integration_service() -> CrudService:
    """Get the integration service singleton."""
    global _integration_service
    if _integration_service is None:
        _integration_service = CrudService(
            INTEGRATION_CONFIG,
            session_factory=async_session_factory,
            updater=EntityUpdater(async_session_factory),
            actor=settings.system_actor,
        )
    return _integration_service
