"""
Pytest configuration for the query-logger project.
"""

import io
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
from dotenv import load_dotenv

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables from .env file when one exists
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)

from query_logger.logging_config import setup_logger  # noqa: E402

DB_ENV_VARS = [
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_SSLMODE",
    "QUERY_CONFIG",
]


def parse_log_lines(text: str) -> List[Dict[str, Any]]:
    """Parse JSON log output into one dict per record."""
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@pytest.fixture(autouse=True)
def clean_db_env(monkeypatch):
    """Keep DB_* variables from the environment out of flag defaults."""
    for var in DB_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def logger(log_stream):
    """JSON logger writing to an in-memory stream."""
    return setup_logger("query_logger.tests", stream=log_stream)


@pytest.fixture
def log_records(log_stream):
    """Callable returning the records written so far."""
    return lambda: parse_log_lines(log_stream.getvalue())
