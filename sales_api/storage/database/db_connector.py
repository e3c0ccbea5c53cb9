from collections.abc import AsyncGenerator
from typing import Any, Dict
from sqlalchemy.engine.url import make_url, URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sales_api.core.settings import settings

raw: str = settings.DATABASE_URL.get_secret_value()


def build_engine_url(raw_url: str) -> URL:
    """
    Postgres URLs are rebuilt without query and with the asyncpg driver
    (sslmode/channel_binding must not reach asyncpg). Anything else is kept.
    """
    u = make_url(raw_url)
    if u.get_backend_name() != "postgresql":
        return u
    return URL.create(
        drivername="postgresql+asyncpg",
        username=u.username,
        password=u.password,
        host=u.host,
        port=u.port,
        database=u.database,
    )


def engine_options(url: URL) -> Dict[str, Any]:
    opts: Dict[str, Any] = {"echo": bool(getattr(settings, "DEBUG", False))}
    if url.get_backend_name() == "postgresql":
        opts.update(
            poolclass=NullPool,
            pool_pre_ping=True,
            execution_options={"isolation_level": "READ COMMITTED"},
            connect_args={
                "ssl": True,
                "statement_cache_size": 0,
            },
        )
    return opts


clean_url: URL = build_engine_url(raw)

engine: AsyncEngine = create_async_engine(
    clean_url.render_as_string(hide_password=False),
    **engine_options(clean_url),
)

async_session = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False, class_=AsyncSession)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = async_session()
    try:
        yield session
    finally:
        # anything staged but not committed is discarded here
        await session.close()


async def init_models() -> None:
    from sales_api.v1_0.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    await engine.dispose()
