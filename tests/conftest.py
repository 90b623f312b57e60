"""Shared fixtures: a temporary SQLite store, the five services and an HTTP client."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from masterdata.main import app
from masterdata.models import Base
from masterdata.schemas.common import ServiceResult
from masterdata.services import (
    INTEGRATION_CONFIG,
    ITEM_CATEGORY_CONFIG,
    KEY_VALUE_CONFIG,
    LIST_CONFIG,
    LIST_INTEGRATION_MAPPING_CONFIG,
    ENTITY_CONFIGS,
    CrudService,
    get_integration_service,
    get_item_category_service,
    get_key_value_config_service,
    get_list_integration_mapping_service,
    get_list_service,
)

TEST_ACTOR = "00000000-0000-0000-0000-000000000001"

SERVICE_PROVIDERS = {
    KEY_VALUE_CONFIG.label: get_key_value_config_service,
    LIST_CONFIG.label: get_list_service,
    ITEM_CATEGORY_CONFIG.label: get_item_category_service,
    INTEGRATION_CONFIG.label: get_integration_service,
    LIST_INTEGRATION_MAPPING_CONFIG.label: get_list_integration_mapping_service,
}

class FakeEntityUpdater:
    """Stands in for the ``updateentity`` procedure, which SQLite does not have.

    Applies the patch to the live row and answers like the procedure does.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.calls = []

    async def apply_patch(self, table_name, patch, key_criteria, actor) -> ServiceResult:
        self.calls.append(
            {"table_name": table_name, "patch": patch, "key_criteria": key_criteria, "actor": actor}
        )
        table = Base.metadata.tables[table_name]
        criteria = [table.c[name] == value for name, value in key_criteria.items()]
        criteria.append(table.c["recSeq"] == 0)

        async with self.session_factory() as session:
            await session.execute(table.update().where(*criteria).values(**patch))
            await session.commit()
            row = (await session.execute(select(table).where(*criteria))).mappings().one()
        return ServiceResult(200, dict(row))


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh SQLite database file per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def updater(session_factory) -> FakeEntityUpdater:
    return FakeEntityUpdater(session_factory)


@pytest.fixture
def services(session_factory, updater) -> dict[str, CrudService]:
    """One service per resource, keyed by the resource label."""
    return {
        config.label: CrudService(config, session_factory, updater, actor=TEST_ACTOR)
        for config in ENTITY_CONFIGS
    }


def _provide(service: CrudService):
    def override() -> CrudService:
        return service

    return override


@pytest_asyncio.fixture
async def client(services) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client wired to the test services."""
    for label, provider in SERVICE_PROVIDERS.items():
        app.dependency_overrides[provider] = _provide(services[label])

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


async def count_rows(session_factory, model) -> int:
    """Count every row of a table, active or not."""
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar()
