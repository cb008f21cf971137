"""Database infrastructure for the client store.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the client database. It belongs to the infrastructure
layer because it deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from fincalc.application.ports.database import DatabaseEnginePort

CLIENT_DB_URL_VAR = "FINCALC_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite URLs keep SQLAlchemy's default pool; server databases get a small
    pool with health checks.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_client_engine: Optional[Engine] = None


def get_client_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the client database.

    Returns:
        Engine: Lazily initialized engine connected to the client store.
    """
    global _client_engine
    if _client_engine is None:
        db_url = _get_env_var(CLIENT_DB_URL_VAR)
        _client_engine = _create_engine(db_url)
    return _client_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories depend only on the protocol.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the client database.

        Returns:
            Engine: SQLAlchemy engine connected to the client store.
        """
        return get_client_engine()


__all__ = [
    "CLIENT_DB_URL_VAR",
    "get_client_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
