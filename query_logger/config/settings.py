"""
Connection settings for the target PostgreSQL database.
"""

from dataclasses import dataclass

from sqlalchemy.engine import URL

DRIVER_NAME = "postgresql+psycopg2"

# Accepted values for the sslmode connection parameter
SSL_MODES = ("disable", "require", "verify-ca", "verify-full")


@dataclass(frozen=True)
class ConnectionSettings:
    """Database connection parameters, fixed for the lifetime of a run."""

    host: str
    port: int
    user: str
    password: str
    database: str
    sslmode: str = "disable"

    def url(self) -> URL:
        """Build the SQLAlchemy URL including the sslmode query argument."""
        return URL.create(
            DRIVER_NAME,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
            query={"sslmode": self.sslmode},
        )

    def safe_url(self) -> str:
        """URL rendered with the password masked, safe to log."""
        return self.url().render_as_string(hide_password=True)
