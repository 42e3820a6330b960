"""
Run a fixed battery of SELECT queries against PostgreSQL and log the results as JSON.
"""

__version__ = "0.1.0"
