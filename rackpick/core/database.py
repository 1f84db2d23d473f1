"""
Rack Pick List Database Configuration
SQLAlchemy setup for the warehouse database
"""
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import MetaData, create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings
from .logging import get_logger

logger = get_logger("database")

# Create base class for models
Base = declarative_base(metadata=MetaData(naming_convention={
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}))


def create_db_engine(database_url: Optional[str] = None, **kwargs) -> Engine:
    """
    Create the SQLAlchemy engine

    Args:
        database_url: Connection URL, defaults to DATABASE_URL from settings

    Returns:
        Engine bound to the warehouse database
    """
    settings = get_settings()
    kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", settings.DEBUG)
    return create_engine(database_url or settings.DATABASE_URL, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Provide a database session for one report run

    Yields:
        Database session
    """
    db = session_factory()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """
    Initialize database tables

    Creates every table declared in rackpick.models that does not exist yet
    """
    # Import models to ensure they are registered with Base
    from rackpick import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


def check_db_connection(engine: Engine) -> bool:
    """
    Check if database connection is working

    Returns:
        True if connection is successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False
