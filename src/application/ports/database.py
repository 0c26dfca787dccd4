"""Database ports for the finance tracker.

This module defines the application-layer protocol for accessing the database
engine. Infrastructure implementations are expected to provide concrete
adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the transactions database engine.

    Store adapters can depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_tracker_engine(self) -> Engine:
        """Get the engine for the transactions database.

        Returns:
            Engine: SQLAlchemy engine connected to the tracker database.
        """


__all__ = ["DatabaseEnginePort"]
