"""Common Pydantic schemas used across the application."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

PAGINATION_KEYS = ("page_number", "limit")
SEARCH_KEYS = (*PAGINATION_KEYS, "search")


@dataclass
class ServiceResult:
    """Envelope returned by every service call.

    ``status`` is the HTTP status code to respond with, ``data`` the raw body.
    """

    status: int
    data: Any = None


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )


class Metadata(BaseSchema):
    """Pagination metadata for list responses."""

    page_number: int | None = None
    limit: int | None = None
    total_count: int = 0


class Page(BaseSchema, Generic[T]):
    """A page of rows with its pagination metadata."""

    data: list[T] = Field(default_factory=list)
    metadata: Metadata


class PaginationFilter(BaseSchema):
    """Pagination fields accepted by every search endpoint."""

    page_number: int | None = None
    limit: int | None = None


class SearchFilter(PaginationFilter):
    """Pagination plus a free-text search term."""

    search: str | None = None


class RecordRead(BaseSchema):
    """Status and audit columns shared by every record."""

    rec_seq: int
    rec_status: str
    data_status: str
    created_by: str
    created_on: datetime | None = None
    modified_on: datetime | None = None
    modified_by: str | None = None
