"""Simple CLI to validate the database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check
and makes sure the transactions table exists.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.transaction_repository import (
    SqlAlchemyTransactionStore,
)


def main() -> None:
    """Run a connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_tracker_engine()
    logger.info(f"Tracker DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    SqlAlchemyTransactionStore(adapter).ensure_schema()

    logger.info("Connection is working and the schema is ready.")


if __name__ == "__main__":
    main()
