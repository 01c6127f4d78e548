"""
Pytest configuration and fixtures.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from carbon_aegis.core.config import ConfigFile, get_config
from carbon_aegis.create_app import get_app
from carbon_aegis.database import Base
from carbon_aegis.database.base import get_db_url, get_engine_kw
from carbon_aegis.database.session_manager.db_session import Database

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

ORGANIZATION_ID = 1
OTHER_ORGANIZATION_ID = 2


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration with the SQLite test database settings.
    """
    return get_config(ConfigFile.TEST)


@pytest_asyncio.fixture(scope="function")
async def test_async_engine(test_config):
    async_db_url = get_db_url(test_config)
    test_engine = create_async_engine(async_db_url, **get_engine_kw(async_db_url))

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function", autouse=True)
async def db_cleanup(test_async_engine):
    """
    Recreate all tables before each test and drop them afterwards.
    """
    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_db_session(test_config, db_cleanup):
    """
    Initialize the Database session manager with the test configuration.
    """
    async_db_url = get_db_url(test_config)
    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))

    yield

    await Database.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_config):
    """
    Create FastAPI application with test configuration.
    """
    app = get_app(ConfigFile.TEST)
    app.state.config = test_config

    yield app


@pytest_asyncio.fixture(scope="function")
async def test_async_client(test_app):
    """
    Async HTTP client calling the app in-process, as a member of organisation 1.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://localhost:8000",
        headers={"X-User-Id": "user-1", "X-Organization-Id": str(ORGANIZATION_ID)},
        follow_redirects=True,
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def test_db_session():
    """
    Provide database session for tests.
    """
    async with Database() as session:
        yield session
