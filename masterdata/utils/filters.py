"""Helpers that turn sparse filter bodies into SQLAlchemy predicates."""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def build_filter(raw_filter: Mapping[str, Any], exclude_keys: Iterable[str] = ()) -> dict[str, Any]:
    """Keep the filter fields that carry a value.

    Keys listed in ``exclude_keys`` (pagination, search) are dropped, as are
    keys whose value is ``None`` or an empty string. Sequence values are kept
    as-is; ``filter_conditions`` turns them into membership tests.

    Example:
        >>> build_filter({"name": "x", "page_number": 2, "search": ""}, ["page_number", "search"])
        {'name': 'x'}
    """
    excluded = set(exclude_keys)
    filters = {}
    for key, value in raw_filter.items():
        if key in excluded or value is None or value == "":
            continue
        filters[key] = list(value) if isinstance(value, _SEQUENCE_TYPES) else value
    return filters


def filter_conditions(model, filters: Mapping[str, Any]) -> list[ColumnElement]:
    """Equality predicates for scalar values, ``IN`` predicates for sequences."""
    conditions = []
    for key, value in filters.items():
        column = getattr(model, key)
        if isinstance(value, _SEQUENCE_TYPES):
            conditions.append(column.in_(list(value)))
        else:
            conditions.append(column == value)
    return conditions


def search_condition(model, fields: Iterable[str], term: str | None) -> ColumnElement | None:
    """Case-insensitive substring match of ``term`` against any of ``fields``.

    ``%`` and ``_`` in the term match literally. Returns None for a blank
    term or when the entity has no searchable fields.
    """
    if not term or not term.strip():
        return None
    matches = [getattr(model, field).icontains(term, autoescape=True) for field in fields]
    if not matches:
        return None
    return or_(*matches)


def page_offset(page_number: int | None, limit: int | None) -> int:
    """Rows to skip for a 1-based page; 0 unless both values are given."""
    if page_number and limit:
        return (page_number - 1) * limit
    return 0
