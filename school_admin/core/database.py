import time

from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def _engine_options() -> dict:
    """Engine keyword arguments for the configured backend."""
    if settings.is_sqlite:
        # Single shared connection so an in-memory database survives across sessions
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
            "echo": settings.DB_ECHO_SQL,
        }

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        "pool_pre_ping": True,

        "echo": settings.DB_ECHO_SQL,

        "connect_args": {
            "connect_timeout": 10,  # Connection timeout in seconds
        },
    }


engine = create_engine(settings.DATABASE_URL, **_engine_options())


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,  # Don't auto-commit transactions
    autoflush=False,   # Don't auto-flush before queries
    bind=engine,
    expire_on_commit=False  # Don't expire objects after commit
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def _import_models() -> None:
    # Registers every table on Base.metadata
    from school_admin.models import enrollment, student, teacher  # noqa: F401


def create_database_tables():
    """
    Create all database tables defined in models.

    Equivalent of an ORM "sync": existing tables are left untouched.
    Schema changes go through Alembic migrations.
    """
    _import_models()
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


def drop_database_tables():
    """
    Drop all database tables.

    Only use in development/testing.
    """
    _import_models()
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    SQLite ignores foreign keys unless asked to enforce them per connection.
    """
    if engine.dialect.name != "sqlite":
        return
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(retries: int = None, delay: float = None) -> None:
    """
    Initialize database.
    Run this when starting the application.

    The connection is retried `retries` times, `delay` seconds apart, so the
    API can start before the database container is ready.
    """
    retries = settings.DB_CONNECT_RETRIES if retries is None else retries
    delay = settings.DB_CONNECT_RETRY_DELAY if delay is None else delay

    logger.info(f"Initializing database {settings.masked_database_url()}...")

    for attempt in range(1, retries + 1):
        if check_database_connection():
            break
        if attempt < retries:
            logger.warning(f"Database not reachable (attempt {attempt}/{retries}), retrying in {delay}s")
            time.sleep(delay)
    else:
        raise RuntimeError(f"Cannot connect to database after {retries} attempts")

    if settings.AUTO_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized successfully")
