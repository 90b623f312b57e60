"""Service for key-value configuration entries (``/master-data``)."""

from masterdata.config import settings
from masterdata.database import async_session_factory
from masterdata.models import KeyValueConfig
from masterdata.schemas.key_value_config import KeyValueConfigRead
from masterdata.services.crud_service import CrudService, EntityConfig
from masterdata.services.entity_updater import EntityUpdater

KEY_VALUE_CONFIG = EntityConfig(
    label="masterData",
    model=KeyValueConfig,
    id_attribute="master_data_id",
    read_schema=KeyValueConfigRead,
    unique_fields=("key_code", "value"),
    search_fields=("key_code", "value"),
)

# Singleton instance
_key_value_config_service: CrudService | None = None


def get_key_value_config_service() -> CrudService:
    """Get the key-value configuration service singleton."""
    global _key_value_config_service
    if _key_value_config_service is None:
        _key_value_config_service = CrudService(
            KEY_VALUE_CONFIG,
            session_factory=async_session_factory,
            updater=EntityUpdater(async_session_factory),
            actor=settings.system_actor,
        )
    return _key_value_config_service
