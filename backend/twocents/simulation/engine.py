"""Projection engine for the CDB and poupança instruments.

Pure functions: every input arrives as an argument, including the reference
rate the caller already fetched. Results are rounded to cents with
``round_money``.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from twocents.simulation.errors import InvalidInput, RateUnavailable
from twocents.simulation.rules import (
    BUSINESS_DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    DEFAULT_PARTICIPATION_PERCENT,
    savings_monthly_rate,
    select_tax_rate,
)

_CENTS = Decimal("0.01")
_ROUNDING_PRECISION = 400  # enough digits for any finite float at cent scale

ZERO_RATE_LINEAR = "linear"
ZERO_RATE_REJECT = "reject"


def round_money(value: float) -> float:
    """Round to 2 decimals, half away from zero.

    Works on the shortest repr of the float so 1234.505 rounds to 1234.51
    rather than falling to the binary value just below the midpoint.
    """
    if not math.isfinite(value):
        raise InvalidInput(f"projection is not a finite amount: {value}")
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION
        return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def _percent(rate: float | Decimal | None, leg: str) -> float:
    if rate is None:
        raise RateUnavailable(leg=leg)
    return float(rate)


def _check_term(principal: float, months: int) -> None:
    if months < 0:
        raise InvalidInput(f"months must be >= 0, got {months}")
    if not math.isfinite(principal) or principal < 0:
        raise InvalidInput(f"principal must be a finite amount >= 0, got {principal}")


def _grow(rate: float, periods: int) -> float:
    try:
        return (1 + rate) ** periods
    except OverflowError:
        raise InvalidInput(f"compounding {periods} periods at {rate} overflows")


def compute_fixed_income(
    principal: float,
    months: int,
    reference_percent: float | Decimal | None,
    participation_percent: float = DEFAULT_PARTICIPATION_PERCENT,
) -> float:
    """Net value of a CDB after ``months``, compounded per business day.

    The principal is floored before compounding while the profit is measured
    against the unfloored principal. Tax comes from the regressive table
    keyed on calendar days held.
    """
    daily_rate = _percent(reference_percent, "fixed-income") / 100.0
    _check_term(principal, months)

    adjusted_daily_rate = daily_rate * (participation_percent / 100.0)

    business_days = months * BUSINESS_DAYS_PER_MONTH
    total_days = (months / 12) * DAYS_PER_YEAR

    final_amount = math.floor(principal) * _grow(adjusted_daily_rate, business_days)
    profit = final_amount - principal

    tax_rate = select_tax_rate(total_days)
    final_amount -= (profit * tax_rate) / 100.0

    return round_money(final_amount)


def compute_savings(
    principal: float,
    months: int,
    annual_policy_percent: float | Decimal | None,
) -> float:
    """Value of a single poupança deposit after ``months`` (tax exempt)."""
    monthly_rate = savings_monthly_rate(_percent(annual_policy_percent, "savings"))
    _check_term(principal, months)

    return round_money(principal * _grow(monthly_rate, months))


def compute_savings_monthly(
    monthly_contribution: float,
    months: int,
    annual_policy_percent: float | Decimal | None,
    accumulated: float | None = None,
    zero_rate_policy: str = ZERO_RATE_LINEAR,
) -> float:
    """Future value of equal monthly poupança deposits plus a starting balance.

    Deposits follow the ordinary annuity formula. With a zero monthly rate the
    annuity degenerates to ``monthly_contribution * months`` ("linear"), or
    raises InvalidInput when the policy is "reject".
    """
    monthly_rate = savings_monthly_rate(_percent(annual_policy_percent, "savings"))
    _check_term(monthly_contribution, months)
    if accumulated is not None and accumulated < 0:
        raise InvalidInput(f"accumulated must be >= 0, got {accumulated}")

    growth = _grow(monthly_rate, months)
    if monthly_rate == 0:
        if zero_rate_policy == ZERO_RATE_REJECT:
            raise InvalidInput("savings monthly rate is zero; annuity is undefined")
        if zero_rate_policy != ZERO_RATE_LINEAR:
            raise InvalidInput(f"unknown zero-rate policy {zero_rate_policy!r}")
        stream_value = monthly_contribution * months
    else:
        # expm1/log1p keep ((1 + r) ** n - 1) / r accurate for rates near zero.
        try:
            growth_minus_one = math.expm1(months * math.log1p(monthly_rate))
        except OverflowError:
            raise InvalidInput(f"compounding {months} periods at {monthly_rate} overflows")
        stream_value = monthly_contribution * growth_minus_one / monthly_rate

    accumulated_value = (accumulated or 0.0) * growth

    return round_money(accumulated_value + stream_value)
