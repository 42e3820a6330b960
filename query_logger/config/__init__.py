"""
Connection settings, command-line flags and query config file handling.
"""

from .settings import ConnectionSettings, SSL_MODES
from .loader import (
    build_parser,
    parse_args,
    load_settings,
    read_config_lines,
    parse_config_line,
)

__all__ = [
    "ConnectionSettings",
    "SSL_MODES",
    "build_parser",
    "parse_args",
    "load_settings",
    "read_config_lines",
    "parse_config_line",
]
