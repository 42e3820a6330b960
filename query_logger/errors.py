"""
Exceptions raised for conditions that end a run.
"""


class QueryLoggerError(Exception):
    """Base class for fatal query-logger errors."""


class ConfigError(QueryLoggerError):
    """Invalid flags, unreadable config file, or a config file that fails validation."""


class DatabaseConnectionError(QueryLoggerError):
    """The database could not be opened or did not answer the liveness check."""


class ResultProcessingError(QueryLoggerError):
    """Reading columns, iterating rows or closing a result failed after execution."""
