"""Pydantic schemas for request and response bodies."""

from masterdata.schemas.common import (
    BaseSchema,
    Metadata,
    Page,
    PaginationFilter,
    RecordRead,
    SearchFilter,
    ServiceResult,
)

__all__ = [
    "BaseSchema",
    "Metadata",
    "Page",
    "PaginationFilter",
    "RecordRead",
    "SearchFilter",
    "ServiceResult",
]
