"""Invariant tests: properties that must hold regardless of parameters.

Covers monotonicity in the term, idempotence, cent precision of every
returned amount, and the skip-on-failure aggregation of monthly deposits.
"""
from decimal import Decimal

import pytest

from twocents.models.rate import IndexKind
from twocents.services.simulation_service import (
    simulate_lump_sum,
    simulate_monthly_contribution,
)
from twocents.simulation.engine import (
    compute_fixed_income,
    compute_savings,
    compute_savings_monthly,
    round_money,
)


def _has_cents_precision(value: float) -> bool:
    return Decimal(repr(value)).as_tuple().exponent >= -2


# ---------------------------------------------------------------------------
# Monotonicity
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("principal", [0, 1, 999.99, 1000, 25_000.5])
def test_fixed_income_non_decreasing_in_months(principal):
    """Longer terms never pay less while the CDI is positive."""
    values = [compute_fixed_income(principal, m, 0.05) for m in range(1, 61)]
    for i in range(1, len(values)):
        assert values[i] >= values[i - 1], (
            f"Value fell from month {i} to {i + 1}: {values[i - 1]} -> {values[i]}"
        )


def test_savings_non_decreasing_in_months():
    for selic in (2.0, 8.0, 13.75):
        values = [compute_savings(1000, m, selic) for m in range(1, 61)]
        assert values == sorted(values)


# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------


def test_engine_outputs_have_at_most_two_decimals():
    outputs = [
        compute_fixed_income(1234.56, m, 0.0437) for m in range(0, 37)
    ] + [
        compute_savings(987.65, m, 7.9) for m in range(1, 37)
    ] + [
        compute_savings_monthly(123.45, m, 10.5, accumulated=321.0) for m in range(1, 37)
    ]
    for value in outputs:
        assert _has_cents_precision(value), value


def test_round_money_is_idempotent():
    for value in (0.005, 1.115, 2295.234, 1e9 + 0.555):
        once = round_money(value)
        assert round_money(once) == once


# ---------------------------------------------------------------------------
# Orchestration invariants
# ---------------------------------------------------------------------------


def test_lump_sum_is_deterministic(fake_provider_cls):
    r1 = simulate_lump_sum(fake_provider_cls(), 10_000, 24)
    r2 = simulate_lump_sum(fake_provider_cls(), 10_000, 24)
    assert r1 == r2


def test_monthly_results_have_cents_precision(rate_provider):
    result = simulate_monthly_contribution(rate_provider, 10_000, 7, accumulated=333.33)
    assert _has_cents_precision(result.fixed_income_value)
    assert _has_cents_precision(result.savings_value)


@pytest.mark.parametrize("failed_call", [1, 5, 12])
def test_monthly_skip_equals_sum_of_remaining_deposits(fake_provider_cls, failed_call):
    """Losing one month's rate drops exactly that deposit from the total."""
    months = 12
    provider = fake_provider_cls(fail_interbank_calls={failed_call})
    result = simulate_monthly_contribution(provider, 12_000, months)

    cdi = provider.rates[IndexKind.INTERBANK]
    expected = sum(
        compute_fixed_income(1000, i, cdi)
        for i in range(months)
        if i != failed_call - 1
    )
    assert result.fixed_income_value == round_money(expected)
    assert result.fixed_income_value > 0
