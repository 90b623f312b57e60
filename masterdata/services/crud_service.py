"""Generic CRUD engine shared by every master data resource.

Each resource is described by an ``EntityConfig``; ``CrudService`` turns that
description into create / find_all / find_unique / update / delete
operations. Every operation returns a ``ServiceResult`` and never raises.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable

from pydantic import BaseModel
from sqlalchemy import func, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from masterdata.database import get_db_context
from masterdata.exceptions import (
    INTERNAL_SERVER_ERROR,
    AlreadyExistsException,
    MasterDataException,
    NotFoundException,
)
from masterdata.models import RecordStatus, active_conditions, active_values
from masterdata.schemas.common import SEARCH_KEYS, Metadata, Page, ServiceResult
from masterdata.services.entity_updater import EntityUpdater
from masterdata.utils.filters import build_filter, filter_conditions, page_offset, search_condition

logger = logging.getLogger(__name__)

DELETED_SUCCESSFULLY = "Deleted successfully"


@dataclass(frozen=True)
class EntityConfig:
    """Per-resource settings for the CRUD engine.

    Attributes:
        label: Human readable resource name used in log lines
        model: SQLAlchemy model class
        id_attribute: Model attribute holding the record id
        read_schema: Pydantic schema rows are returned as
        unique_fields: Fields no two active rows may share
        search_fields: Text fields matched by the ``search`` term
        order_by: Ordering applied to search results
        filter_exclude: Filter body keys that never become predicates
    """

    label: str
    model: type
    id_attribute: str
    read_schema: type[BaseModel]
    unique_fields: tuple[str, ...]
    search_fields: tuple[str, ...] = ()
    order_by: tuple[Any, ...] = ()
    filter_exclude: tuple[str, ...] = field(default=SEARCH_KEYS)

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @property
    def id_column(self):
        return getattr(self.model, self.id_attribute)

    @property
    def id_column_name(self) -> str:
        """Database column name of the id (e.g. ``listId``)."""
        return inspect(self.model).attrs[self.id_attribute].columns[0].name


def service_operation(operation: str) -> Callable:
    """Close a service method off: every outcome becomes a ``ServiceResult``.

    ``MasterDataException`` subclasses map to their own status and message;
    any other exception is logged and reported as a 500.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self: "CrudService", *args, **kwargs) -> ServiceResult:
            label = self.config.label
            logger.info(f"{operation} {label}: input={args}")
            try:
                result = await func(self, *args, **kwargs)
            except MasterDataException as exc:
                logger.error(f"{operation} {label} failed: {exc.message}")
                return ServiceResult(exc.status_code, exc.message)
            except Exception as exc:
                logger.error(f"{operation} {label} failed: {type(exc).__name__}: {exc}")
                return ServiceResult(500, INTERNAL_SERVER_ERROR)
            logger.info(f"{operation} {label} successfully: status={result.status}")
            return result

        return wrapper

    return decorator


class CrudService:
    """Create, search, fetch, patch and soft-delete one kind of master data record."""

    def __init__(
        self,
        config: EntityConfig,
        session_factory: async_sessionmaker[AsyncSession],
        updater: EntityUpdater,
        actor: str,
    ):
        self.config = config
        self.session_factory = session_factory
        self.updater = updater
        self.actor = actor

    def _active_query(self, record_id: str):
        return select(self.config.model).where(
            self.config.id_column == record_id,
            *active_conditions(self.config.model),
        )

    async def _get_active(self, session: AsyncSession, record_id: str):
        result = await session.execute(self._active_query(record_id))
        return result.scalar_one_or_none()

    def _read(self, row) -> BaseModel | None:
        if row is None:
            return None
        return self.config.read_schema.model_validate(row)

    @service_operation("create")
    async def create(self, payload: BaseModel) -> ServiceResult:
        """Insert a new active record unless one with the same unique key exists."""
        model = self.config.model
        values = payload.model_dump()

        # Unset optional key fields do not narrow the duplicate lookup
        unique_filter = {
            name: values[name] for name in self.config.unique_fields if values.get(name) is not None
        }

        async with get_db_context(self.session_factory) as session:
            existing = await session.execute(
                select(model)
                .where(*filter_conditions(model, unique_filter), *active_conditions(model))
                .limit(1)
            )
            if existing.scalar_one_or_none() is not None:
                raise AlreadyExistsException()

            row = model(**values, **active_values(), created_by=self.actor)
            session.add(row)
            await session.flush()
            await session.refresh(row)

        return ServiceResult(201, self._read(row))

    @service_operation("find all")
    async def find_all(self, filters: BaseModel) -> ServiceResult:
        """Search active records, returning one page and the total match count."""
        model = self.config.model
        raw = filters.model_dump()
        page_number = raw.get("page_number")
        limit = raw.get("limit")

        conditions = filter_conditions(model, build_filter(raw, self.config.filter_exclude))
        matched = search_condition(model, self.config.search_fields, raw.get("search"))
        if matched is not None:
            conditions.append(matched)
        conditions.extend(active_conditions(model))

        query = select(model).where(*conditions).offset(page_offset(page_number, limit))
        if limit is not None:
            query = query.limit(limit)
        if self.config.order_by:
            query = query.order_by(*self.config.order_by)
        count_query = select(func.count()).select_from(model).where(*conditions)

        rows, total_count = await asyncio.gather(
            self._fetch_rows(query),
            self._fetch_count(count_query),
        )

        page = Page(
            data=[self._read(row) for row in rows],
            metadata=Metadata(page_number=page_number, limit=limit, total_count=total_count),
        )
        return ServiceResult(200, page)

    async def _fetch_rows(self, query) -> list:
        async with self.session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def _fetch_count(self, query) -> int:
        async with self.session_factory() as session:
            return (await session.execute(query)).scalar() or 0

    @service_operation("find unique")
    async def find_unique(self, record_id: str) -> ServiceResult:
        """Fetch the live record; a missing id yields 200 with ``None``."""
        async with self.session_factory() as session:
            row = await self._get_active(session, record_id)
        return ServiceResult(200, self._read(row))

    @service_operation("update")
    async def update(self, record_id: str, payload: BaseModel) -> ServiceResult:
        """Patch the live record through the update procedure."""
        async with self.session_factory() as session:
            existing = await self._get_active(session, record_id)
        if existing is None:
            raise NotFoundException()

        patch = payload.model_dump(exclude_unset=True, by_alias=True)
        patch["modifiedBy"] = self.actor
        updated = await self.updater.apply_patch(
            self.config.table_name,
            patch,
            {self.config.id_column_name: record_id},
            self.actor,
        )
        return ServiceResult(200, updated)

    @service_operation("delete")
    async def delete(self, record_id: str) -> ServiceResult:
        """Soft-delete the live record by marking it inactive."""
        model = self.config.model
        async with get_db_context(self.session_factory) as session:
            existing = await self._get_active(session, record_id)
            if existing is None:
                raise NotFoundException()

            await session.execute(
                update(model)
                .where(self.config.id_column == record_id, *active_conditions(model))
                .values({model.rec_status: RecordStatus.INACTIVE.value, model.modified_by: self.actor})
            )

        return ServiceResult(200, DELETED_SUCCESSFULLY)
