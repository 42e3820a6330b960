"""
Query executor that runs the configured SELECT queries and collects their rows.
"""

import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy import Connection
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import SQLAlchemyError

from query_logger.config.loader import parse_config_line
from query_logger.database.query_validator import sanitize_query
from query_logger.errors import ResultProcessingError

Row = Dict[str, Any]
ResultMap = Dict[str, List[Row]]


def serialize_value(value: Any) -> Any:
    """Convert binary column values to text; everything else is returned unchanged."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return value


class QueryExecutor:
    """
    Executes config file queries in order against one open connection.

    A query the database rejects is logged and skipped. Failures after a
    query has executed (columns, row iteration, closing the result) raise
    ResultProcessingError and end the run.
    """

    def __init__(self, connection: Connection, logger: logging.Logger):
        """
        Initialize the query executor.

        Args:
            connection: Open SQLAlchemy connection
            logger: Logger shared by the run
        """
        self.connection = connection
        self.logger = logger

    def run(self, lines: Sequence[str]) -> ResultMap:
        """
        Execute every valid query in the config lines.

        Args:
            lines: Raw config file lines; line numbers in log records are 1-based

        Returns:
            Mapping of query name to its rows. A repeated name keeps the last result.
        """
        result_map: ResultMap = {}

        for i, line in enumerate(lines):
            line = line.strip()
            if not line:
                continue

            parsed = parse_config_line(line)
            if parsed is None:
                self.logger.warning(
                    f"Invalid line format in config file at line {i + 1}: {line}"
                )
                continue

            name, query_text = parsed
            query, is_valid = sanitize_query(query_text)
            if not is_valid:
                self.logger.warning(
                    f"Invalid query in config file at line {i + 1}: {query_text}"
                )
                continue

            try:
                result = self.execute_query(query)
            except SQLAlchemyError as e:
                self.logger.warning(f"Error executing query {i + 1} ({name}): {e}")
                continue

            result_map[name] = self.collect_rows(result)

        return result_map

    def execute_query(self, query: str) -> CursorResult:
        """
        Send the query text to the driver as-is.

        No bind parameter parsing is done, so colons and percent signs in
        the query reach the database untouched.
        """
        return self.connection.exec_driver_sql(
            query, execution_options={"no_parameters": True}
        )

    def collect_rows(self, result: CursorResult) -> List[Row]:
        """
        Convert a result into a list of column name to value mappings.

        Raises:
            ResultProcessingError: If columns or rows cannot be read, or the result cannot be closed
        """
        rows: List[Row] = []

        # e.g. SELECT ... INTO produces no result rows at all
        if not result.returns_rows:
            self._close_result(result)
            return rows

        try:
            columns = list(result.keys())
        except SQLAlchemyError as e:
            raise ResultProcessingError(f"Failed to read result columns: {e}") from e

        try:
            for record in result:
                rows.append(
                    {col: serialize_value(val) for col, val in zip(columns, record)}
                )
        except Exception as e:
            raise ResultProcessingError(f"Failed to read result rows: {e}") from e

        self._close_result(result)
        return rows

    def _close_result(self, result: CursorResult) -> None:
        try:
            result.close()
        except SQLAlchemyError as e:
            raise ResultProcessingError(f"Failed to close result: {e}") from e
