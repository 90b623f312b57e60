"""Pydantic schemas for List entities."""

from pydantic import Field

from masterdata.schemas.common import BaseSchema, RecordRead, SearchFilter


class ListCreate(BaseSchema):
    """Schema for creating a list."""

    name: str = Field(..., min_length=1, max_length=50, description="List name (e.g., 'Groceries')")


class ListUpdate(BaseSchema):
    """Schema for updating a list."""

    name: str | None = Field(None, min_length=1, max_length=50)


class ListFilter(SearchFilter):
    """Search body for lists."""

    name: str | None = Field(None, max_length=50)


class ListRead(RecordRead):
    """Schema for list response."""

    list_id: str
    name: str
