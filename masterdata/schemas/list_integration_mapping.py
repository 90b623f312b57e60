"""Pydantic schemas for list-integration mappings."""

from pydantic import Field

from masterdata.schemas.common import BaseSchema, PaginationFilter, RecordRead


class ListIntegrationMappingCreate(BaseSchema):
    """Schema for mapping an integration onto a list."""

    list_id: str = Field(..., min_length=1, max_length=36, description="List id")
    integration_id: str = Field(..., min_length=1, max_length=36, description="Integration id")


class ListIntegrationMappingUpdate(BaseSchema):
    """Schema for updating a mapping."""

    list_id: str | None = Field(None, min_length=1, max_length=36)
    integration_id: str | None = Field(None, min_length=1, max_length=36)


class ListIntegrationMappingFilter(PaginationFilter):
    """Search body for mappings. Mappings have no free-text search."""

    list_id: str | list[str] | None = None
    integration_id: str | list[str] | None = None


class ListIntegrationMappingRead(RecordRead):
    """Schema for mapping response."""

    list_integration_mapping_id: str
    list_id: str
    list_rec_seq: int = 0
    integration_id: str
    integration_rec_seq: int = 0
