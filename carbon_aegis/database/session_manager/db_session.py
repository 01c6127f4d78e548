"""
Async session manager.

``Database.init`` is called once at startup (or per test) and every unit of
work then opens ``async with Database() as session``. The session commits when
the block exits cleanly and rolls back when it raises.
"""
import logging

from sqlalchemy.engine.url import URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from carbon_aegis.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    _engine: AsyncEngine | None = None
    _async_session_maker: async_sessionmaker | None = None

    def __init__(self):
        self._session: AsyncSession | None = None

    @classmethod
    def init(cls, async_db_url: URL, engine_kw: dict | None = None):
        """Create the process-wide engine and session maker."""
        cls._engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = async_sessionmaker(
            bind=cls._engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.debug(f"Database initialised for {async_db_url.get_backend_name()}")

    @classmethod
    async def dispose(cls):
        if cls._engine is not None:
            await cls._engine.dispose()
        cls._engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if self._async_session_maker is None:
            raise DatabaseNotInitialized(
                "Database not initialized. Call Database.init() first."
            )
        self._session = self._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        session = self._session
        try:
            if exc_type is None:
                try:
                    await session.commit()
                except Exception as e:
                    await session.rollback()
                    logger.error(f"Commit failed: {e}")
                    raise DatabaseTransactionError(str(e)) from e
            else:
                await session.rollback()
        finally:
            await session.close()
            self._session = None
