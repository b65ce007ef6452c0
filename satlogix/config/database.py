"""
Database Configuration
Engine, session factory and declarative base, switchable between
PostgreSQL, MySQL and SQLite through DATABASE_URL
"""

import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from satlogix.config.settings import settings


class UnsupportedDatabaseError(ValueError):
    """Raised for a DATABASE_URL that is not PostgreSQL, MySQL or SQLite"""


_PROVIDER_PREFIXES = {
    "postgresql": ("postgresql://", "postgresql+"),
    "mysql": ("mysql://", "mysql+"),
    "sqlite": ("sqlite://", "sqlite+"),
}


def normalize_database_url(url: str) -> str:
    """
    Rewrite a connection string into the form SQLAlchemy expects

    Accepts the legacy ``postgres://`` scheme and the ``file:`` form
    used for SQLite files in other ORMs.

    Args:
        url: Raw connection string

    Returns:
        str: SQLAlchemy database URL

    Raises:
        UnsupportedDatabaseError: If the provider cannot be determined
    """
    url = (url or "").strip()

    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    elif url.startswith("file:"):
        url = "sqlite:///" + url[len("file:"):]

    for prefixes in _PROVIDER_PREFIXES.values():
        if url.startswith(prefixes):
            return url

    raise UnsupportedDatabaseError(
        f"Unsupported DATABASE_URL '{url}'. Use a postgresql://, mysql:// or sqlite:// URL"
    )


def get_database_provider(url: str) -> str:
    """
    Detect the database provider of a connection string

    Returns:
        str: "postgresql", "mysql" or "sqlite"
    """
    normalized = normalize_database_url(url)
    for provider, prefixes in _PROVIDER_PREFIXES.items():
        if normalized.startswith(prefixes):
            return provider
    raise UnsupportedDatabaseError(f"Unsupported DATABASE_URL '{url}'")


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine with provider specific connection options"""
    normalized = normalize_database_url(url)

    if get_database_provider(normalized) == "sqlite":
        return create_engine(
            normalized,
            echo=echo,
            connect_args={"check_same_thread": False}
        )

    return create_engine(normalized, echo=echo, pool_pre_ping=True)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE rules unless foreign keys are switched on"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Database session dependency"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
