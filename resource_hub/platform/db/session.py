from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from resource_hub.platform.config import settings


def _engine_options(url: str) -> dict:
    # SQLite connections are opened per session so they never outlive an event loop
    if url.startswith("sqlite"):
        return {"poolclass": NullPool, "connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_recycle": 1800,
        "pool_size": 20,
        "max_overflow": 30,
        "pool_timeout": 30,
    }


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    future=True,
    **_engine_options(settings.DATABASE_URL),
)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, autoflush=False, autocommit=False)


async def get_db():
    async with SessionLocal() as session:
        yield session


async def init_db():
    """Create any missing tables."""
    from resource_hub.platform.db.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
