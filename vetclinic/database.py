"""
Database connection and session management.
Provides SQLAlchemy engine, session, and base class for models.
"""
from functools import lru_cache
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .config import get_settings

# Create base class for declarative models
Base = declarative_base()


def _engine_options(database_url: str, timeout: int) -> Dict[str, Any]:
    """
    Build driver-specific engine options for the configured database.

    Args:
        database_url: SQLAlchemy connection string
        timeout: Timeout in seconds for connection checkout and statements

    Returns:
        Dict of keyword arguments for create_engine
    """
    if database_url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # A memory database only lives as long as its single connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    options = {"pool_pre_ping": True, "pool_timeout": timeout}
    if database_url.startswith("postgresql"):
        options["connect_args"] = {
            "connect_timeout": timeout,
            "options": f"-c statement_timeout={timeout * 1000}",
        }
    return options


@lru_cache
def get_engine() -> Engine:
    """
    Create the SQLAlchemy engine on first use.

    Returns:
        Engine: Process-wide engine bound to settings.database_url
    """
    settings = get_settings()
    return create_engine(
        settings.database_url,
        **_engine_options(settings.database_url, settings.request_timeout_seconds),
    )


@lru_cache
def get_session_factory() -> sessionmaker:
    """
    Create the session factory on first use.

    Returns:
        sessionmaker: Factory producing sessions bound to the engine
    """
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False)


def get_db():
    """
    Database dependency - Creates and yields a database session.

    The session is automatically closed after the request is processed,
    even if an exception occurs during request handling.

    Yields:
        SQLAlchemy Session: Database session
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
