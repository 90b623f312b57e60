"""Pydantic schemas for key-value configuration entries."""

from pydantic import Field

from masterdata.schemas.common import BaseSchema, RecordRead, SearchFilter


class KeyValueConfigCreate(BaseSchema):
    """Schema for creating a configuration entry."""

    key_code: str = Field(..., min_length=1, max_length=50, description="Key code")
    value: str | None = Field(None, max_length=50, description="Value")
    parent_id: str | None = Field(None, max_length=50, description="Parent id")


class KeyValueConfigUpdate(BaseSchema):
    """Schema for updating a configuration entry."""

    key_code: str | None = Field(None, min_length=1, max_length=50)
    value: str | None = Field(None, max_length=50)
    parent_id: str | None = Field(None, max_length=50)


class KeyValueConfigFilter(SearchFilter):
    """Search body for configuration entries. ``search`` matches keyCode or value."""

    key_code: str | None = None
    value: str | None = None
    parent_id: str | list[str] | None = None


class KeyValueConfigRead(RecordRead):
    """Schema for configuration entry response."""

    master_data_id: str
    key_code: str
    value: str | None = None
    parent_id: str | None = None
