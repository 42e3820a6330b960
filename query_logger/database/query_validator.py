"""
Allowlist check for configured queries.

Only statements that start with the SELECT keyword are run. This is a
textual guard and not a SQL parser: it keeps accidental mutations out of a
config file, nothing more.
"""

import logging
import re
from typing import Sequence, Tuple

from query_logger.config.loader import parse_config_line

SELECT_PATTERN = re.compile(r"^\s*SELECT\b", re.IGNORECASE | re.ASCII)


def sanitize_query(query: str) -> Tuple[str, bool]:
    """
    Check a query against the SELECT allowlist.

    Args:
        query: Query text from the config file

    Returns:
        Tuple of (query, True) when accepted, ("", False) otherwise
    """
    if query and SELECT_PATTERN.match(query):
        return query, True
    return "", False


def validate_config(lines: Sequence[str], logger: logging.Logger) -> bool:
    """
    Check every non-blank config line before any query runs.

    Stops at the first line that has no query part or whose query is
    rejected, logging a warning with its line number.

    Returns:
        True when every line is acceptable
    """
    for i, line in enumerate(lines):
        line = line.strip()
        if not line:
            continue

        parsed = parse_config_line(line)
        if parsed is None:
            logger.warning(f"Invalid line format in config file at line {i + 1}: {line}")
            return False

        _, is_valid = sanitize_query(parsed[1])
        if not is_valid:
            logger.warning(f"Invalid query in config file at line {i + 1}: {parsed[1]}")
            return False

    return True
