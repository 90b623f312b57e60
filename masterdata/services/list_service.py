"""Service for lists."""

from masterdata.config import settings
from masterdata.database import async_session_factory
from masterdata.models import List
from masterdata.schemas.list import ListRead
from masterdata.services.crud_service import CrudService, EntityConfig
from masterdata.services.entity_updater import EntityUpdater

LIST_CONFIG = EntityConfig(
    label="lists",
    model=List,
    id_attribute="list_id",
    read_schema=ListRead,
    unique_fields=("name",),
    search_fields=("name",),
)

# Singleton instance
_list_service: CrudService | None = None


def get_list_service() -> CrudService:
    """Get the list service singleton."""
    global _list_service
    if _list_service is None:
        _list_service = CrudService(
            LIST_CONFIG,
            session_factory=async_session_factory,
            updater=EntityUpdater(async_session_factory),
            actor=settings.system_actor,
        )
    return _list_service
