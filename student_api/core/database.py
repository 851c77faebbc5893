from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from .config import Settings
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the async engine and its bounded connection pool.

    At most DB_POOL_SIZE + DB_MAX_OVERFLOW connections are checked out at
    once; further checkouts wait up to DB_POOL_TIMEOUT seconds.
    """
    engine = create_async_engine(
        settings.DATABASE_URL,

        # Connection pool settings
        pool_size=settings.DB_POOL_SIZE,  # Number of connections to keep open
        max_overflow=settings.DB_MAX_OVERFLOW,  # Max connections beyond pool_size
        pool_timeout=settings.DB_POOL_TIMEOUT,  # Seconds to wait for connection
        pool_recycle=settings.DB_POOL_RECYCLE,  # Recycle connections after N seconds

        # Test connection before using (detect disconnects)
        pool_pre_ping=True,

        # Print all SQL queries to console
        echo=settings.DB_ECHO_SQL,
    )

    if settings.DEBUG:
        _attach_pool_listeners(engine)

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,   # Don't auto-flush before queries
        expire_on_commit=False  # Don't expire objects after commit
    )


# =============================================================================
# EVENT LISTENERS
# =============================================================================

def _attach_pool_listeners(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "checkout")
    def receive_checkout(dbapi_conn, connection_record, connection_proxy):
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def receive_checkin(dbapi_conn, connection_record):
        logger.debug("Connection returned to pool")


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

async def create_database_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables defined in models.

    Only creates missing tables; existing ones are left as they are.
    """
    import student_api.models.student  # noqa: F401  registers the table on Base

    logger.info("Creating database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


async def check_database_connection(engine: AsyncEngine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
