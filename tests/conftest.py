import os
import tempfile

# point the app at a throwaway sqlite file before database.py builds its engines
_TEST_DB = os.path.join(tempfile.mkdtemp(prefix="catalog-tests-"), "catalog.db")
os.environ["DATABASE_ASYNC_URL"] = f"sqlite+aiosqlite:///{_TEST_DB}"
os.environ["DATABASE_SYNC_URL"] = f"sqlite:///{_TEST_DB}"

import httpx  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from database import Base, enforce_sqlite_foreign_keys, get_async_db  # noqa: E402
from main import app  # noqa: E402
import models  # noqa: E402,F401


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(os.environ["DATABASE_ASYNC_URL"], poolclass=NullPool)
    enforce_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_async_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c
    app.dependency_overrides.clear()
