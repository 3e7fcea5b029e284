"""Simulation engine: regulatory rules, projections, and typed errors."""
from twocents.simulation.errors import InvalidInput, RateUnavailable, SimulationError
from twocents.simulation.rules import TAX_BRACKETS, TaxBracket, savings_monthly_rate, select_tax_rate
from twocents.simulation.engine import (
    compute_fixed_income,
    compute_savings,
    compute_savings_monthly,
    round_money,
)

__all__ = [
    "SimulationError",
    "RateUnavailable",
    "InvalidInput",
    "TaxBracket",
    "TAX_BRACKETS",
    "select_tax_rate",
    "savings_monthly_rate",
    "compute_fixed_income",
    "compute_savings",
    "compute_savings_monthly",
    "round_money",
]
