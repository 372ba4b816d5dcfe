import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)
from src.infrastructure.database.models import Base

logger = logging.getLogger(__name__)


class PostgresClient:
    def __init__(
        self,
        db_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
        create_schema: bool = True,
    ):
        self._db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)

        self._engine = create_async_engine(
            self._db_url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            pool_pre_ping=True,
        )

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )
        self._create_schema = create_schema
        self._is_initialized = False
        self._init_lock = asyncio.Lock()

    async def init(self) -> None:
        """
        Check connectivity and optionally create the tables.

        Tried once at startup and again before store operations until it
        succeeds, so the server can start while the database is down.
        Raises on connectivity failure.
        """
        if self._is_initialized:
            return

        async with self._init_lock:
            if self._is_initialized:
                return

            logger.info("🔌 Initializing PostgreSQL connection...")

            async with self._engine.begin() as conn:
                await conn.execute(text("SELECT 1"))

                if self._create_schema:
                    logger.info("🧱 Creating database schema if missing...")
                    await conn.run_sync(Base.metadata.create_all)

            self._is_initialized = True
            logger.info("✅ PostgreSQL client initialized successfully")

    async def close(self) -> None:
        """
        Dispose the engine and release pooled connections.
        """
        # health probes may have opened connections even if init never succeeded
        await self._engine.dispose()
        self._is_initialized = False
        logger.info("🔌 PostgreSQL client closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async session context manager; rolls back on error.
        """
        async with self._session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logger.error(f"❌ Error in DB session, rollback applied: {e}")
                raise

    async def ping(self, timeout: Optional[float] = None) -> None:
        """
        Run SELECT 1, raising on connectivity failure or timeout.
        """
        async def _probe() -> None:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

        await asyncio.wait_for(_probe(), timeout=timeout)
