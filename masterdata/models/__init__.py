"""SQLAlchemy models for the master data service."""

from masterdata.models.base import (
    DEFAULT_REC_SEQ,
    Base,
    DataStatus,
    RecordMixin,
    RecordStatus,
    active_conditions,
    active_values,
    new_record_id,
)
from masterdata.models.key_value_config import KeyValueConfig
from masterdata.models.list import List
from masterdata.models.item_category import ItemCategory
from masterdata.models.integration import Integration
from masterdata.models.list_integration_mapping import ListIntegrationMapping

__all__ = [
    # Base
    "Base",
    "RecordMixin",
    "RecordStatus",
    "DataStatus",
    "DEFAULT_REC_SEQ",
    "active_conditions",
    "active_values",
    "new_record_id",
    # Entities
    "KeyValueConfig",
    "List",
    "ItemCategory",
    "Integration",
    "ListIntegrationMapping",
]
