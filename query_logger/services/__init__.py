"""
Services that act on the collected query results.
"""

from .result_reporter import ResultReporter

__all__ = ["ResultReporter"]
