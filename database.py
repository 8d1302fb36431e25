from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from config import (
    DATABASE_ASYNC_URL,
    DATABASE_SYNC_URL,
    DB_ECHO,
    DB_MAX_OVERFLOW,
    DB_POOL_SIZE,
)


def _engine_options(url: str) -> dict:
    options = {"echo": DB_ECHO, "future": True}
    # sqlite pools do not take size arguments
    if not url.startswith("sqlite"):
        options.update(pool_size=DB_POOL_SIZE, max_overflow=DB_MAX_OVERFLOW)
    return options


def enforce_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on REFERENCES checks for every new sqlite connection.

    SQLite ships with foreign keys off and the pragma is per connection.
    Other backends are left untouched.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


sync_engine = create_engine(DATABASE_SYNC_URL, **_engine_options(DATABASE_SYNC_URL))
async_engine = create_async_engine(
    DATABASE_ASYNC_URL, **_engine_options(DATABASE_ASYNC_URL)
)
enforce_sqlite_foreign_keys(sync_engine)
enforce_sqlite_foreign_keys(async_engine.sync_engine)

AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, autoflush=False, expire_on_commit=False
)

Base = declarative_base()


async def get_async_db():
    async with AsyncSessionLocal() as db:
        yield db
