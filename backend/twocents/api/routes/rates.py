from fastapi import APIRouter, Depends

from twocents.api.deps import get_rate_provider
from twocents.models.rate import IndexKind, LatestRates
from twocents.services.rate_provider import RateProvider
from twocents.simulation.errors import RateUnavailable

router = APIRouter(tags=["rates"])


@router.get("/rates/latest", response_model=LatestRates)
def get_latest_rates(provider: RateProvider = Depends(get_rate_provider)):
    """Latest CDI and SELIC values the simulations would use right now.

    A missing index is reported as null instead of failing the request.
    """
    latest = {}
    for field_name, kind in (("interbank", IndexKind.INTERBANK), ("policy_rate", IndexKind.POLICY_RATE)):
        try:
            latest[field_name] = provider.get_last_rate(kind)
        except RateUnavailable:
            latest[field_name] = None
    return LatestRates(**latest)
