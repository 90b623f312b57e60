"""Pydantic schemas for Integration entities."""

from pydantic import Field

from masterdata.schemas.common import BaseSchema, RecordRead, SearchFilter


class IntegrationCreate(BaseSchema):
    """Schema for creating an integration."""

    name: str = Field(..., min_length=1, max_length=50, description="Integration name")
    label: str | None = Field(None, max_length=50, description="Display label")
    popularity: int | None = Field(None, description="Popularity rank/score")


class IntegrationUpdate(BaseSchema):
    """Schema for updating an integration."""

    name: str | None = Field(None, min_length=1, max_length=50)
    label: str | None = Field(None, max_length=50)
    popularity: int | None = None


class IntegrationFilter(SearchFilter):
    """Search body for integrations."""

    name: str | None = Field(None, max_length=50)
    label: str | None = Field(None, max_length=50)


class IntegrationRead(RecordRead):
    """Schema for integration response."""

    integration_id: str
    name: str
    label: str | None = None
    popularity: int | None = None
