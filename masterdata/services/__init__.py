"""Service layer for business logic."""

from masterdata.services.crud_service import CrudService, EntityConfig
from masterdata.services.entity_updater import EntityUpdater
from masterdata.services.integration_service import INTEGRATION_CONFIG, get_integration_service
from masterdata.services.item_category_service import ITEM_CATEGORY_CONFIG, get_item_category_service
from masterdata.services.key_value_config_service import KEY_VALUE_CONFIG, get_key_value_config_service
from masterdata.services.list_integration_mapping_service import (
    LIST_INTEGRATION_MAPPING_CONFIG,
    get_list_integration_mapping_service,
)
from masterdata.services.list_service import LIST_CONFIG, get_list_service

ENTITY_CONFIGS = (
    KEY_VALUE_CONFIG,
    LIST_CONFIG,
    ITEM_CATEGORY_CONFIG,
    INTEGRATION_CONFIG,
    LIST_INTEGRATION_MAPPING_CONFIG,
)

__all__ = [
    "CrudService",
    "EntityConfig",
    "EntityUpdater",
    "ENTITY_CONFIGS",
    "KEY_VALUE_CONFIG",
    "get_key_value_config_service",
    "LIST_CONFIG",
    "get_list_service",
    "ITEM_CATEGORY_CONFIG",
    "get_item_category_service",
    "INTEGRATION_CONFIG",
    "get_integration_service",
    "LIST_INTEGRATION_MAPPING_CONFIG",
    "get_list_integration_mapping_service",
]
