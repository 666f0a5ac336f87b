"""
Database Session Management - Core database connectivity layer
"""

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
from typing import Generator
import logging

from taskdesk.core.config import Settings, settings

logger = logging.getLogger(__name__)


def create_db_engine(config: Settings) -> Engine:
    """
    Build the engine for the configured database.

    Server databases get a bounded connection pool; SQLite gets a
    thread-shareable connection (in-memory databases need a single one).
    """
    url = config.DATABASE_URL
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool  # Every session must see the same in-memory database
        return create_engine(url, echo=config.DEBUG, **options)

    return create_engine(
        url,
        pool_size=config.DB_POOL_SIZE,  # Number of persistent connections
        max_overflow=config.DB_MAX_OVERFLOW,  # Additional connections when pool is exhausted
        pool_timeout=config.DB_POOL_TIMEOUT,  # Wait time for available connection
        pool_pre_ping=True,  # Verify connection health before using
        echo=config.DEBUG,  # Log all SQL queries in debug mode
    )


engine = create_db_engine(settings)


@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    logger.debug("🔌 New database connection established")


@event.listens_for(engine, "close")
def receive_close(dbapi_conn, connection_record):
    logger.debug("🔌 Database connection closed")


# Session factory - one session per request
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Base class for all ORM models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session per request.
    Rolls back on failure and always closes the session.
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"❌ Database error during request: {str(e)}")
        db.rollback()  # Leave no partial writes behind
        raise
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        logger.debug("✅ Database session closed")


def init_db() -> None:
    """
    Create all tables.
    Used for development setup and first start against an empty database.
    """
    logger.info("🏗️  Creating database tables...")
    try:
        from taskdesk.models import user, task  # noqa: F401 - register models with Base
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database tables created successfully")
    except Exception as e:
        logger.error(f"❌ Failed to create database tables: {str(e)}", exc_info=True)
        raise


def check_db_connection() -> bool:
    """
    Verify database connectivity - used for health checks and startup validation.
    """
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        logger.debug("✅ Database connection successful")
        return True
    except Exception as e:
        logger.error(f"❌ Database connection failed: {str(e)}", exc_info=True)
        return False


def get_pool_stats() -> dict:
    """Current connection pool statistics (sizes are only tracked by QueuePool)"""
    pool = engine.pool
    if not isinstance(pool, QueuePool):
        return {"pool_class": type(pool).__name__}
    return {
        "pool_size": pool.size(),  # Total connections in pool
        "checked_out": pool.checkedout(),  # Currently active connections
        "overflow": pool.overflow(),  # Connections beyond pool_size
        "checked_in": pool.checkedin(),  # Idle connections in pool
    }


def close_db_connections():
    """Dispose of all pooled connections on shutdown"""
    logger.info("🔌 Closing database connections...")
    engine.dispose()
    logger.info("✅ All database connections closed")
