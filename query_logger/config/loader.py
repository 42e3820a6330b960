"""
Command-line flags and query config file loading.
"""

import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from query_logger.config.settings import SSL_MODES, ConnectionSettings
from query_logger.errors import ConfigError

DEFAULT_CONFIG_PATH = "config.txt"


def build_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser.

    Defaults come from the DB_* environment variables when they are set,
    otherwise from the built-in placeholders.
    """
    parser = argparse.ArgumentParser(
        prog="query-logger",
        description="Run the SELECT queries listed in a config file and log the results as JSON",
    )
    parser.add_argument(
        "-ip", "--ip",
        dest="ip",
        default=os.getenv("DB_HOST", "127.0.0.1"),
        help="Database IP address",
    )
    parser.add_argument(
        "-port", "--port",
        dest="port",
        default=os.getenv("DB_PORT", "5432"),
        help="Database port",
    )
    parser.add_argument(
        "-user", "--user",
        dest="user",
        default=os.getenv("DB_USER", "USERNAME"),
        help="Database user",
    )
    parser.add_argument(
        "-password", "--password",
        dest="password",
        default=os.getenv("DB_PASSWORD", "PASSWORD"),
        help="Database password",
    )
    parser.add_argument(
        "-db", "--db",
        dest="db",
        default=os.getenv("DB_NAME", "DBNAME"),
        help="Database name",
    )
    parser.add_argument(
        "-ssl", "--ssl",
        dest="ssl",
        default=os.getenv("DB_SSLMODE", "disable"),
        help="SSL mode (disable, require, verify-ca, verify-full)",
    )
    parser.add_argument(
        "-config", "--config",
        dest="config",
        default=os.getenv("QUERY_CONFIG", DEFAULT_CONFIG_PATH),
        help="Path to the query config file",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def load_settings(args: argparse.Namespace) -> ConnectionSettings:
    """
    Validate parsed flags and build the connection settings.

    Raises:
        ConfigError: If the SSL mode or port is not acceptable
    """
    if args.ssl not in SSL_MODES:
        raise ConfigError(
            f'unsupported sslmode "{args.ssl}"; use disable, require, verify-ca, or verify-full'
        )

    try:
        port = int(args.port)
    except (TypeError, ValueError):
        raise ConfigError(f'invalid port "{args.port}"; must be a number')
    if not 0 < port < 65536:
        raise ConfigError(f"invalid port {port}; must be between 1 and 65535")

    return ConnectionSettings(
        host=args.ip,
        port=port,
        user=args.user,
        password=args.password,
        database=args.db,
        sslmode=args.ssl,
    )


def read_config_lines(path, logger: logging.Logger) -> List[str]:
    """
    Read the query config file and split it into raw lines.

    Raises:
        ConfigError: If the file is missing or cannot be read
    """
    config_path = Path(path)
    try:
        data = config_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        logger.info(f"can't read {config_path} or it doesn't exist")
        raise ConfigError(str(e)) from e
    return data.split("\n")


def parse_config_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a config line into (name, query) on the first space.

    Returns None when the line has no query part.
    """
    parts = line.strip().split(" ", 1)
    if len(parts) < 2:
        return None
    return parts[0], parts[1]
