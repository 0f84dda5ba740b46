"""Monthly-equivalent values for recurring amounts"""

from typing import Iterable

from assetflow.domain.models import FrequencyKind, FrequencyPolicy, RecurringAmount

WEEKS_PER_YEAR = 52
FORTNIGHTS_PER_YEAR = 26
DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12
DEFAULT_INTERVAL_DAYS = 30  # EVERY_N_DAYS with a missing or zero interval


def to_monthly_value(amount: float, policy: FrequencyPolicy) -> float:
    """
    Convert a recurring amount into its average value per month.

    Conversions:
    - WEEKLY: amount × 52 / 12
    - FORTNIGHTLY: amount × 26 / 12
    - MONTHLY, SPECIFIC_DAY_OF_MONTH: amount
    - YEARLY: amount / 12
    - EVERY_N_DAYS: amount × 365 / N / 12 (N defaults to 30)

    Example:
        $100 weekly → 100 × 52 / 12 = $433.33/month
    """
    kind = policy.kind

    if kind == FrequencyKind.WEEKLY:
        return amount * WEEKS_PER_YEAR / MONTHS_PER_YEAR
    if kind == FrequencyKind.FORTNIGHTLY:
        return amount * FORTNIGHTS_PER_YEAR / MONTHS_PER_YEAR
    if kind in (FrequencyKind.MONTHLY, FrequencyKind.SPECIFIC_DAY_OF_MONTH):
        return amount
    if kind == FrequencyKind.YEARLY:
        return amount / MONTHS_PER_YEAR
    if kind == FrequencyKind.EVERY_N_DAYS:
        interval = policy.custom_value or DEFAULT_INTERVAL_DAYS
        return amount * DAYS_PER_YEAR / interval / MONTHS_PER_YEAR

    return 0.0


def total_monthly_value(records: Iterable[RecurringAmount]) -> float:
    """Sum of monthly equivalents across records"""
    return sum((to_monthly_value(r.amount, r.policy) for r in records), 0.0)
