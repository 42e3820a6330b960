"""
Database utilities for query validation, execution and result processing.
"""

from .connection import DatabaseClient
from .query_executor import QueryExecutor, serialize_value
from .query_validator import sanitize_query, validate_config

__all__ = [
    "DatabaseClient",
    "QueryExecutor",
    "serialize_value",
    "sanitize_query",
    "validate_config",
]
