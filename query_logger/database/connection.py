"""
Single PostgreSQL connection held for the duration of a run.
"""

import logging
from typing import Optional

from sqlalchemy import Connection, Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from query_logger.config.settings import ConnectionSettings
from query_logger.errors import DatabaseConnectionError


class DatabaseClient:
    """
    Opens one connection, checks it answers, and releases it on exit.

    Use as a context manager; the connection and engine are closed on every
    exit path, including exceptions raised inside the block.
    """

    def __init__(self, settings: ConnectionSettings, logger: logging.Logger):
        self.settings = settings
        self.logger = logger
        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            raise DatabaseConnectionError("database connection is not open")
        return self._connection

    def connect(self) -> Connection:
        """
        Create the engine, open the connection and run the liveness check.

        Raises:
            DatabaseConnectionError: If the connection cannot be opened or does not answer
        """
        try:
            # Autocommit keeps a failed statement from aborting the ones after it
            self._engine = create_engine(
                self.settings.url(), isolation_level="AUTOCOMMIT"
            )
            self._connection = self._engine.connect()

            # Test connection
            self._connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            self.close()
            raise DatabaseConnectionError(
                f"Database connection to {self.settings.safe_url()} failed: {e}"
            ) from e

        self.logger.info("connected to database")
        return self._connection

    def close(self) -> None:
        """Close the connection and dispose of the engine."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "DatabaseClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
