from fastapi import APIRouter, Depends

from twocents.api.deps import get_rate_provider
from twocents.models.simulation import SimulationMode, SimulationRequest, SimulationResult
from twocents.services.rate_provider import RateProvider
from twocents.services.simulation_service import run_simulation

router = APIRouter(tags=["simulations"])


@router.post("/simulations/lump-sum", response_model=SimulationResult)
def simulate_lump_sum_endpoint(
    request: SimulationRequest,
    provider: RateProvider = Depends(get_rate_provider),
):
    """Compare a CDB and poupança for a single deposit of ``principal``."""
    return run_simulation(provider, request, SimulationMode.lump_sum)


@router.post("/simulations/monthly", response_model=SimulationResult)
def simulate_monthly_endpoint(
    request: SimulationRequest,
    provider: RateProvider = Depends(get_rate_provider),
):
    """Compare both instruments when ``principal`` is saved in equal monthly deposits.

    ``accumulated`` is money already saved; it is invested in full on day one.
    """
    return run_simulation(provider, request, SimulationMode.monthly)
