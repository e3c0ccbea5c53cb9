"""
Tests for engine URL handling
"""

from sales_api.storage.database.db_connector import build_engine_url, engine_options


def test_postgres_url_switched_to_asyncpg_without_query():
    url = build_engine_url("postgresql://user:pw@db.example:5432/sales?sslmode=require&channel_binding=require")

    assert url.drivername == "postgresql+asyncpg"
    assert (url.username, url.password, url.host, url.port, url.database) == (
        "user",
        "pw",
        "db.example",
        5432,
        "sales",
    )
    assert dict(url.query) == {}


def test_sqlite_url_untouched():
    url = build_engine_url("sqlite+aiosqlite:///./sales.db")

    assert url.drivername == "sqlite+aiosqlite"
    assert url.database == "./sales.db"


def test_asyncpg_options_only_for_postgres():
    pg = engine_options(build_engine_url("postgresql://u:p@h/db"))
    lite = engine_options(build_engine_url("sqlite+aiosqlite:///:memory:"))

    assert pg["connect_args"]["statement_cache_size"] == 0
    assert "connect_args" not in lite
