"""Tests for settings derived from the environment."""

import pytest

from masterdata.config import Settings


@pytest.mark.parametrize(
    "database_url, expected",
    [
        ("postgresql://u:p@db:5432/md", "postgresql+asyncpg://u:p@db:5432/md"),
        ("postgres://u:p@db:5432/md", "postgresql+asyncpg://u:p@db:5432/md"),
        ("postgresql+asyncpg://u:p@db:5432/md", "postgresql+asyncpg://u:p@db:5432/md"),
        ("sqlite+aiosqlite:///./md.db", "sqlite+aiosqlite:///./md.db"),
    ],
)
def test_async_database_url(database_url, expected):
    assert Settings(database_url=database_url).async_database_url == expected


def test_cors_origins_list():
    settings = Settings(cors_origins=" https://a.example , https://b.example ,")

    assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("MASTERDATA_PORT", "4100")

    assert Settings().masterdata_port == 4100


def test_defaults(monkeypatch):
    monkeypatch.delenv("MASTERDATA_PORT", raising=False)
    monkeypatch.delenv("DB_SCHEMA", raising=False)

    settings = Settings(_env_file=None)

    assert settings.masterdata_port == 3002
    assert settings.db_schema == "public"
