"""Pydantic schemas for ItemCategory entities."""

from pydantic import Field

from masterdata.schemas.common import BaseSchema, RecordRead, SearchFilter


class ItemCategoryCreate(BaseSchema):
    """Schema for creating an item category."""

    list_id: str = Field(..., min_length=1, max_length=36, description="Parent list id")
    name: str = Field(..., min_length=1, max_length=50, description="Category name")


class ItemCategoryUpdate(BaseSchema):
    """Schema for updating an item category."""

    list_id: str | None = Field(None, min_length=1, max_length=36)
    name: str | None = Field(None, min_length=1, max_length=50)


class ItemCategoryFilter(SearchFilter):
    """Search body for item categories."""

    list_id: str | list[str] | None = None
    name: str | None = Field(None, max_length=50)


class ItemCategoryRead(RecordRead):
    """Schema for item category response."""

    item_category_id: str
    list_id: str
    list_rec_seq: int = 0
    name: str
