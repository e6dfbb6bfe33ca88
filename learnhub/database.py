from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from typing import Optional

from learnhub.settings.config import require_database_url

Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_session_maker: Optional[sessionmaker] = None


def normalize_url(raw_url: str) -> str:
    # if someone provided a sync URL by mistake, upgrade it to async
    for sync_prefix in ("postgresql+psycopg2://", "postgresql+psycopg://", "postgresql://", "postgres://"):
        if raw_url.startswith(sync_prefix):
            return "postgresql+asyncpg://" + raw_url[len(sync_prefix):]
    if raw_url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + raw_url[len("sqlite://"):]
    return raw_url


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    engine = create_async_engine(normalize_url(url), echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        # SQLite ignores ON DELETE CASCADE unless asked per connection
        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_fk_on(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()
    return engine


def make_session_maker(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        _engine = make_engine(require_database_url())
    return _engine


def get_session_maker() -> sessionmaker:
    global _session_maker
    if _session_maker is None:
        _session_maker = make_session_maker(get_engine())
    return _session_maker


async def get_db():
    async with get_session_maker()() as session:
        yield session


async def init_db(engine: AsyncEngine):
    # Dev/test convenience; production schemas come from Alembic
    from learnhub import models  # noqa: F401  registers all tables on Base
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
