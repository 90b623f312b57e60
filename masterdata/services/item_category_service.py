"""Service for item categories."""

from masterdata.config import settings
from masterdata.database import async_session_factory
from masterdata.models import ItemCategory
from masterdata.schemas.item_category import ItemCategoryRead
from masterdata.services.crud_service import CrudService, EntityConfig
from masterdata.services.entity_updater import EntityUpdater

ITEM_CATEGORY_CONFIG = EntityConfig(
    label="itemCategories",
    model=ItemCategory,
    id_attribute="item_category_id",
    read_schema=ItemCategoryRead,
    # Category names only need to be unique within their list
    unique_fields=("name", "list_id"),
    search_fields=("name",),
)

# Singleton instance
_item_category_service: CrudService | None = None


def get_item_category_service() -> CrudService:
    """Get the item category service singleton."""
    global _item_category_service
    if _item_category_service is None:
        _item_category_service = CrudService(
            ITEM_CATEGORY_CONFIG,
            session_factory=async_session_factory,
            updater=EntityUpdater(async_session_factory),
            actor=settings.system_actor,
        )
    return _item_category_service
