"""Reference-rate sources for the simulations.

Every request looks the rates up again; values are never cached between
requests.
"""
from __future__ import annotations

import logging

from twocents.db.connection import MetricsDatabase
from twocents.db.queries.metrics import get_last_metric_value
from twocents.models.rate import IndexKind, ReferenceRate
from twocents.simulation.errors import RateUnavailable

logger = logging.getLogger(__name__)


class RateProvider:
    """Source of the latest published value for a reference index."""

    def get_last_rate(self, index_kind: IndexKind) -> ReferenceRate:
        raise NotImplementedError

    def close(self) -> None:
        pass


class DatabaseRateProvider(RateProvider):
    """Reads the latest index value from the Metrics table.

    The connection is opened on the first lookup and reused for the rest of
    the request, so a monthly simulation does not reconnect per deposit.
    """

    def __init__(self, database: MetricsDatabase):
        self._database = database
        self._conn = None

    def _connection(self, index_kind: IndexKind):
        if self._conn is None:
            try:
                self._conn = self._database.open()
            except RuntimeError as e:
                logger.warning("No metrics connection for %s lookup: %s", index_kind.name, e)
                raise RateUnavailable(index_kind) from e
        return self._conn

    def get_last_rate(self, index_kind: IndexKind) -> ReferenceRate:
        conn = self._connection(index_kind)
        try:
            value = get_last_metric_value(conn, int(index_kind))
        except Exception as e:
            logger.warning("Rate lookup for %s failed: %s", index_kind.name, e)
            raise RateUnavailable(index_kind) from e

        if value is None:
            logger.warning("No stored value for %s", index_kind.name)
            raise RateUnavailable(index_kind)

        return ReferenceRate(index_kind=index_kind, annual_percent=value)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
