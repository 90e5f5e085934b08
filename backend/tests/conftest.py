import asyncio
import os

# The app module builds its engine at import time; keep it off PostgreSQL.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from cardstudio.auth import CurrentUser
from cardstudio.db.session import Base, get_db
from cardstudio.main import create_app
from cardstudio.services.design_service import DesignService
from cardstudio.services.profile_service import ProfileService


async def _create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'cards.db'}"


@pytest.fixture
async def engine(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)
    await _create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def alice():
    return CurrentUser(id="user-alice")


@pytest.fixture
def bob():
    return CurrentUser(id="user-bob")


@pytest.fixture
def profiles_for(db):
    def _make(user: CurrentUser) -> ProfileService:
        return ProfileService(db, user)

    return _make


@pytest.fixture
def designs_for(db):
    def _make(user: CurrentUser) -> DesignService:
        return DesignService(db, user)

    return _make


@pytest.fixture
def client(db_url):
    """TestClient whose requests each get a session on a fresh SQLite file."""
    engine = create_async_engine(db_url, poolclass=NullPool)
    asyncio.run(_create_schema(engine))
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _override_get_db():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    asyncio.run(engine.dispose())
