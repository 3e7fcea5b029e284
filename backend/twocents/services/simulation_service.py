"""Simulation orchestration service.

Fetches the reference rates, runs the engine for each instrument and
assembles a SimulationResult. Two modes:

- lump sum: one CDB and one poupança projection over the whole term;
- monthly: the goal is split into equal deposits. Each deposit opens its own
  CDB (summed), while poupança uses the closed-form annuity.
"""
from __future__ import annotations

import logging

from twocents.config import settings
from twocents.models.rate import IndexKind
from twocents.models.simulation import SimulationMode, SimulationRequest, SimulationResult
from twocents.services.rate_provider import RateProvider
from twocents.simulation.engine import (
    compute_fixed_income,
    compute_savings,
    compute_savings_monthly,
    round_money,
)
from twocents.simulation.errors import InvalidInput, RateUnavailable

logger = logging.getLogger(__name__)


def _fetch_percent(provider: RateProvider, index_kind: IndexKind, leg: str):
    try:
        return provider.get_last_rate(index_kind).annual_percent
    except RateUnavailable as e:
        # Re-raise with the leg that needed the rate so callers can report it.
        raise RateUnavailable(index_kind, leg=leg) from e


def simulate_lump_sum(
    provider: RateProvider,
    principal: float,
    months: int,
    accumulated: float | None = None,
) -> SimulationResult:
    """Project a single deposit in both instruments.

    ``accumulated`` is accepted for parity with the monthly mode and has no
    effect here. Any missing rate aborts the simulation.
    """
    if months < 1:
        raise InvalidInput(f"months must be >= 1, got {months}")

    cdi = _fetch_percent(provider, IndexKind.INTERBANK, "fixed-income")
    fixed_income = compute_fixed_income(
        principal, months, cdi, settings.FIXED_INCOME_PARTICIPATION_PERCENT,
    )

    selic = _fetch_percent(provider, IndexKind.POLICY_RATE, "savings")
    savings = compute_savings(principal, months, selic)

    logger.debug(
        "Lump sum %.2f over %d months: cdb=%.2f poupanca=%.2f",
        principal, months, fixed_income, savings,
    )
    return SimulationResult(fixed_income_value=fixed_income, savings_value=savings)


def simulate_monthly_contribution(
    provider: RateProvider,
    principal: float,
    months: int,
    accumulated: float | None = None,
) -> SimulationResult:
    """Project a savings goal reached through equal monthly deposits.

    Deposit ``i`` (0-based) is simulated as a CDB held for ``i`` months. A
    deposit whose rate lookup fails is left out of the total. The poupança
    leg and the extra CDB over ``accumulated`` must both succeed.
    """
    if months < 1:
        raise InvalidInput(f"months must be >= 1, got {months}")

    contribution = principal / months
    participation = settings.FIXED_INCOME_PARTICIPATION_PERCENT

    fixed_income_total = 0.0
    skipped = 0
    for month_index in range(months):
        try:
            cdi = provider.get_last_rate(IndexKind.INTERBANK).annual_percent
        except RateUnavailable as e:
            skipped += 1
            logger.warning("Skipping deposit %d/%d: %s", month_index + 1, months, e)
            continue
        fixed_income_total += compute_fixed_income(contribution, month_index, cdi, participation)

    selic = _fetch_percent(provider, IndexKind.POLICY_RATE, "savings")
    savings = compute_savings_monthly(
        contribution, months, selic, accumulated,
        zero_rate_policy=settings.SAVINGS_ZERO_RATE_POLICY,
    )

    if accumulated is not None:
        cdi = _fetch_percent(provider, IndexKind.INTERBANK, "accumulated fixed-income")
        fixed_income_total += compute_fixed_income(accumulated, months, cdi, participation)

    fixed_income = round_money(fixed_income_total)
    logger.debug(
        "Monthly goal %.2f over %d months (%d deposits skipped): cdb=%.2f poupanca=%.2f",
        principal, months, skipped, fixed_income, savings,
    )
    return SimulationResult(fixed_income_value=fixed_income, savings_value=savings)


def run_simulation(
    provider: RateProvider, request: SimulationRequest, mode: SimulationMode,
) -> SimulationResult:
    """Dispatch a validated request to the simulation for ``mode``."""
    if mode == SimulationMode.monthly:
        return simulate_monthly_contribution(
            provider, request.principal, request.months, request.accumulated,
        )
    return simulate_lump_sum(provider, request.principal, request.months, request.accumulated)
