"""Regulatory rules for the simulated instruments.

Tax brackets and savings-rate thresholds are kept as data so a change in
legislation only touches this module.
"""
from __future__ import annotations

from dataclasses import dataclass

BUSINESS_DAYS_PER_MONTH = 21
DAYS_PER_YEAR = 365
DEFAULT_PARTICIPATION_PERCENT = 100.0


@dataclass(frozen=True)
class TaxBracket:
    """Withholding rate applied when the holding period is below upper_days."""
    upper_days: float | None   # exclusive; None = open-ended
    rate_percent: float


# Regressive income-tax table for fixed income (Lei 11.033/2004).
TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(upper_days=180, rate_percent=22.5),
    TaxBracket(upper_days=360, rate_percent=20.0),
    TaxBracket(upper_days=720, rate_percent=17.5),
    TaxBracket(upper_days=None, rate_percent=15.0),
)


@dataclass(frozen=True)
class SavingsRule:
    """Poupança remuneration: share of SELIC below the threshold, flat rate above."""
    threshold_annual: float
    policy_rate_share: float
    fixed_monthly_rate: float


SAVINGS_RULE = SavingsRule(
    threshold_annual=0.085,
    policy_rate_share=0.7,
    fixed_monthly_rate=0.005,
)


def select_tax_rate(total_calendar_days: float, brackets: tuple[TaxBracket, ...] = TAX_BRACKETS) -> float:
    """Return the withholding rate (percent) for a holding period in days."""
    for bracket in brackets:
        if bracket.upper_days is None or total_calendar_days < bracket.upper_days:
            return bracket.rate_percent
    # Table without an open-ended bracket: longest period pays the last rate.
    return brackets[-1].rate_percent


def savings_monthly_rate(annual_policy_percent: float, rule: SavingsRule = SAVINGS_RULE) -> float:
    """Monthly poupança rate for a given annual SELIC percentage."""
    annual_rate = annual_policy_percent / 100
    if annual_rate < rule.threshold_annual:
        return (rule.policy_rate_share * annual_rate) / 12
    return rule.fixed_monthly_rate
