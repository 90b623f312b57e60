"""Service for list-integration mappings."""

from masterdata.config import settings
from masterdata.database import async_session_factory
from masterdata.models import ListIntegrationMapping
from masterdata.schemas.common import PAGINATION_KEYS
from masterdata.schemas.list_integration_mapping import ListIntegrationMappingRead
from masterdata.services.crud_service import CrudService, EntityConfig
from masterdata.services.entity_updater import EntityUpdater

LIST_INTEGRATION_MAPPING_CONFIG = EntityConfig(
    label="listIntegrationMapping",
    model=ListIntegrationMapping,
    id_attribute="list_integration_mapping_id",
    read_schema=ListIntegrationMappingRead,
    unique_fields=("list_id", "integration_id"),
    filter_exclude=PAGINATION_KEYS,
)

# Singleton instance
_list_integration_mapping_service: CrudService | None = None


def get_list_integration_mapping_service() -> CrudService:
    """Get the list-integration mapping service singleton."""
    global _list_integration_mapping_service
    if _list_integration_mapping_service is None:
        _list_integration_mapping_service = CrudService(
            LIST_INTEGRATION_MAPPING_CONFIG,
            session_factory=async_session_factory,
            updater=EntityUpdater(async_session_factory),
            actor=settings.system_actor,
        )
    return _list_integration_mapping_service
