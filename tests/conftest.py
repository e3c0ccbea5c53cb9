"""
Pytest configuration and fixtures for the SalesApi tests
"""

from collections.abc import AsyncGenerator
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from sales_api.main import create_app
from sales_api.storage.database.db_connector import get_db
from sales_api.utils.tx import UnitOfWork
from sales_api.v1_0.models import Base, Customer

# SQLite in-memory, one shared connection per test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class RecordingUrlBuilder:
    """URL builder double: records every call and renders a predictable href."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any], Dict[str, Any]]] = []

    def build_href(
        self,
        route_name: str,
        path_params: Mapping[str, Any],
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        query_params = dict(query_params or {})
        self.calls.append((route_name, dict(path_params), query_params))
        href = "/".join([f"http://test/{route_name}", *(str(v) for v in path_params.values())])
        query = "&".join(f"{k}={v}" for k, v in query_params.items() if v not in (None, ""))
        return f"{href}?{query}" if query else href


class CountingUnitOfWork(UnitOfWork):
    commits = 0

    async def save(self) -> bool:
        type(self).commits += 1
        return await super().save()


class FailingUnitOfWork(UnitOfWork):
    async def save(self) -> bool:
        await self.session.rollback()
        return False


@pytest.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed_customer(session_factory) -> Callable[..., Any]:
    """Insert a customer in its own session and return its id."""

    async def _seed(name: str = "Acme", **fields: Any) -> int:
        async with session_factory() as session:
            deleted = fields.pop("deleted", False)
            c = Customer(name=name, deleted=deleted, **fields)
            session.add(c)
            await session.commit()
            return c.id

    return _seed


@pytest.fixture
def url_builder() -> RecordingUrlBuilder:
    return RecordingUrlBuilder()


@pytest.fixture
def app(session_factory):
    """Full application with the database dependency pointed at the test engine"""
    test_app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    test_app.dependency_overrides[get_db] = override_get_db
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as test_client:
        yield test_client
