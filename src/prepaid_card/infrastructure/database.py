"""Database connection and session management for Prepaid Card Service."""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from prepaid_card.config import settings

# Base class for all ORM models
Base = declarative_base()


def create_db_engine(database_url: str | None = None) -> Engine:
    """
    Create a SQLAlchemy engine for the card store.

    Args:
        database_url: Connection URL. If None, uses settings.database_url

    Returns:
        Configured SQLAlchemy engine
    """
    url = make_url(database_url or settings.database_url)

    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=settings.database_echo,
        )

    engine = create_engine(
        url,
        pool_size=10,  # Number of connections to keep open
        max_overflow=20,  # Additional connections when pool is full
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,  # Recycle connections after 1 hour
        echo=settings.database_echo,
    )

    if url.get_backend_name() == "postgresql":

        @event.listens_for(engine, "connect")
        def set_postgresql_pragma(dbapi_conn, connection_record):  # type: ignore
            cursor = dbapi_conn.cursor()
            cursor.execute("SET timezone='UTC'")
            cursor.execute("SET statement_timeout='30000'")  # 30 second timeout
            cursor.close()

    return engine


# Global engine and session factory
engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session(
    session_factory: sessionmaker | None = None,
) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Usage:
        with get_db_session() as session:
            CardRepository(session).find_by_card_number("5541710500064352")

    Automatically commits on success, rolls back on exception.
    """
    session = (session_factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables.

    Args:
        engine: Optional engine to use. If None, uses global engine.
    """
    # Register models on Base.metadata
    from prepaid_card.infrastructure import models  # noqa: F401

    target_engine = engine or globals()['engine']
    Base.metadata.create_all(bind=target_engine)


def drop_all_tables(engine: Engine | None = None) -> None:
    """
    Drop all tables in the database.

    WARNING: This is destructive and should only be used for testing.

    Args:
        engine: Optional engine to use. If None, uses global engine.
    """
    target_engine = engine or globals()['engine']
    Base.metadata.drop_all(bind=target_engine)
