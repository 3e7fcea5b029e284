"""Connection handling for the metrics database the rate lookups read."""
from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

try:
    import pyodbc
except ImportError:
    pyodbc = None

from twocents.config import settings

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT_SECONDS = 30


class MetricsDatabase:
    """Opens pyodbc connections to the database holding CDI/SELIC metrics.

    Nothing is opened at startup; connections are created on demand by the
    rate provider, so requests that never reach a lookup never touch the DB.
    """

    def __init__(self):
        self._conn_string: str = ""

    @property
    def is_configured(self) -> bool:
        return pyodbc is not None and bool(self._conn_string)

    def configure(self, conn_string: str | None = None) -> None:
        self._conn_string = settings.SQLSERVER_CONN_STRING if conn_string is None else conn_string
        if self._conn_string:
            logger.info("Metrics database configured")
        else:
            logger.warning("No SQLSERVER_CONN_STRING configured: rate lookups will fail")

    def open(self, retries: int = 3, delay: float = 1.0):
        """Open a connection, retrying driver errors. Raises RuntimeError on failure."""
        if pyodbc is None:
            raise RuntimeError("pyodbc is not installed (missing ODBC driver)")
        if not self._conn_string:
            raise RuntimeError("Metrics database is not configured")

        last_error = None
        for attempt in range(1, retries + 1):
            try:
                return pyodbc.connect(self._conn_string, timeout=_CONNECT_TIMEOUT_SECONDS)
            except pyodbc.Error as e:
                last_error = e
                logger.warning("Metrics DB connection attempt %d/%d failed: %s", attempt, retries, e)
                if attempt < retries:
                    time.sleep(delay)

        raise RuntimeError(f"Metrics database unreachable after {retries} attempts: {last_error}")

    @contextmanager
    def connection(self, retries: int = 3) -> Iterator:
        conn = self.open(retries=retries)
        try:
            yield conn
        finally:
            conn.close()

    def status(self) -> dict:
        """Report whether the Metrics table is reachable and how many rows it holds."""
        if pyodbc is None:
            return {"status": "unavailable", "message": "pyodbc not installed"}
        if not self._conn_string:
            return {"status": "not_configured", "message": "No connection string set"}
        try:
            with self.connection(retries=1) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT COUNT(*) FROM Metrics")
                metric_rows = cursor.fetchone()[0]
        except Exception as e:
            return {"status": "error", "message": str(e)}
        return {"status": "connected", "metric_rows": metric_rows}

    def reset(self) -> None:
        logger.info("Metrics database configuration cleared")
        self._conn_string = ""


metrics_db = MetricsDatabase()
