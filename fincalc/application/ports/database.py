"""Database ports for the client store.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the client store.

    Repositories depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the client store.

        Returns:
            Engine: SQLAlchemy engine connected to the client database.
        """


__all__ = ["DatabaseEnginePort"]
