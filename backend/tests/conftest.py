import sys
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# Mock pyodbc so tests can run without ODBC drivers installed
if "pyodbc" not in sys.modules:
    sys.modules["pyodbc"] = MagicMock()

from twocents.models.rate import IndexKind, ReferenceRate  # noqa: E402
from twocents.services.rate_provider import RateProvider  # noqa: E402
from twocents.simulation.errors import RateUnavailable  # noqa: E402

DEFAULT_CDI = Decimal("0.05")     # daily CDI percentage
DEFAULT_SELIC = Decimal("10.75")  # annual SELIC percentage


class FakeRateProvider(RateProvider):
    """In-memory rate source.

    ``fail_interbank_calls`` holds 1-based call numbers of INTERBANK lookups
    that should fail, to exercise partial outages.
    """

    def __init__(self, cdi=DEFAULT_CDI, selic=DEFAULT_SELIC, fail_interbank_calls=()):
        self.rates = {IndexKind.INTERBANK: cdi, IndexKind.POLICY_RATE: selic}
        self.fail_interbank_calls = set(fail_interbank_calls)
        self.calls: list[IndexKind] = []

    def get_last_rate(self, index_kind: IndexKind) -> ReferenceRate:
        self.calls.append(index_kind)
        value = self.rates.get(index_kind)
        if value is None:
            raise RateUnavailable(index_kind)
        if index_kind == IndexKind.INTERBANK and self.calls.count(index_kind) in self.fail_interbank_calls:
            raise RateUnavailable(index_kind)
        return ReferenceRate(index_kind=index_kind, annual_percent=value)


@pytest.fixture
def fake_provider_cls():
    return FakeRateProvider


@pytest.fixture
def rate_provider():
    return FakeRateProvider()
