"""Process-scoped resources shared by every request."""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from student_api.core.config import Settings
from student_api.core.database import (
    create_database_tables,
    create_engine_from_settings,
    create_session_factory,
)

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    http_client: httpx.AsyncClient

    @classmethod
    async def create(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "AppContext":
        """Build the engine, session factory and outbound client once at startup."""
        logger.info(f"Connecting to {settings.masked_database_url()} (pool size {settings.DB_POOL_SIZE})")
        engine = create_engine_from_settings(settings)
        if settings.DB_CREATE_TABLES:
            await create_database_tables(engine)

        if http_client is None:
            http_client = httpx.AsyncClient(timeout=settings.REMOTE_FUNCTION_TIMEOUT)

        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            http_client=http_client,
        )

    async def aclose(self) -> None:
        await self.http_client.aclose()
        await self.engine.dispose()
        logger.info("Application resources released")
