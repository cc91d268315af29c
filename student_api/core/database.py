from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def build_engine_kwargs(database_url: str) -> dict:
    """
    Engine options for the configured backend.

    SQLite does not support pool_size, max_overflow or connect_timeout, and an
    in-memory database only lives as long as its single connection.
    """
    kwargs = {"echo": settings.DB_ECHO_SQL}

    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs.update({
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,  # Number of connections to keep open
        "max_overflow": settings.DB_MAX_OVERFLOW,  # Max connections beyond pool_size
        "pool_timeout": settings.DB_POOL_TIMEOUT,  # Seconds to wait for connection
        "pool_recycle": settings.DB_POOL_RECYCLE,  # Recycle connections after N seconds
        "pool_pre_ping": True,  # Detect dropped connections before use
        "connect_args": {
            "connect_timeout": 10,
        },
    })
    return kwargs


engine = create_engine(settings.DATABASE_URL, **build_engine_kwargs(settings.DATABASE_URL))


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Objects stay readable after commit for serialization
)

# Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables():
    """
    Create all database tables defined in models.

    Only for development and tests. In production, use Alembic migrations instead.
    """
    # Register models on Base.metadata
    from student_api.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


def drop_database_tables():
    """
    Drop all database tables.

    This deletes all data. Only use in development/testing.
    """
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
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "connect")
def on_connect(dbapi_conn, connection_record):
    """
    Event listener for new database connections.
    Can be used to set connection-specific settings.
    """
    if settings.DEBUG:
        logger.debug("New database connection established")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        raise RuntimeError("Cannot connect to database!")

    if settings.AUTO_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized successfully")
