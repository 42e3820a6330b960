"""
Reporter that emits the collected results as one structured log record.
"""

import logging
from typing import Any, Dict, List


class ResultReporter:
    """Logs the complete result map once, at the end of a run."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def report(self, result_map: Dict[str, List[Dict[str, Any]]]) -> None:
        """
        Emit the result map as the fields of a single ``output`` record.

        Args:
            result_map: Mapping of query name to its rows
        """
        self.logger.info("output", extra={"fields": dict(result_map)})
