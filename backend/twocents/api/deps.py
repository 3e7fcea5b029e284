from collections.abc import Generator

from twocents.db.connection import metrics_db
from twocents.services.rate_provider import DatabaseRateProvider, RateProvider


def get_rate_provider() -> Generator[RateProvider, None, None]:
    """Per-request rate provider; its connection opens on the first lookup."""
    provider = DatabaseRateProvider(metrics_db)
    try:
        yield provider
    finally:
        provider.close()
