"""
Command-line entry point: run the configured query battery and log the results.
"""

import logging
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from query_logger.config.loader import (
    load_settings,
    parse_args,
    read_config_lines,
)
from query_logger.database.connection import DatabaseClient
from query_logger.database.query_executor import QueryExecutor
from query_logger.database.query_validator import validate_config
from query_logger.errors import ConfigError, QueryLoggerError
from query_logger.logging_config import setup_logger
from query_logger.services.result_reporter import ResultReporter


def run(argv: Optional[Sequence[str]], logger: logging.Logger) -> None:
    """
    Execute one run: flags, config validation, connection, queries, report.

    Raises:
        QueryLoggerError: On any condition that ends the run
    """
    args = parse_args(argv)
    settings = load_settings(args)

    lines = read_config_lines(args.config, logger)
    if not validate_config(lines, logger):
        raise ConfigError("Config file validation failed.")

    with DatabaseClient(settings, logger) as client:
        result_map = QueryExecutor(client.connection, logger).run(lines)

    ResultReporter(logger).report(result_map)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run query-logger and return the process exit status."""
    # Load environment variables used as flag defaults
    load_dotenv(find_dotenv(usecwd=True))

    logger = setup_logger()
    logger.info("Initialized")

    try:
        run(argv, logger)
    except QueryLoggerError as e:
        logger.critical(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
