from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class IndexKind(IntEnum):
    """Reference indexes the simulations read. Values are metric type ids."""
    INTERBANK = 1     # CDI
    POLICY_RATE = 2   # SELIC


class ReferenceRate(BaseModel):
    """Latest published value of an index, as a percentage (13.25 = 13.25%)."""
    model_config = ConfigDict(frozen=True)

    index_kind: IndexKind
    annual_percent: Decimal


class LatestRates(BaseModel):
    interbank: ReferenceRate | None = None
    policy_rate: ReferenceRate | None = None
