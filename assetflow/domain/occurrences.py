"""Upcoming occurrence dates for recurring records"""

from datetime import date, timedelta
from itertools import accumulate, repeat
from typing import List, Optional, Sequence

from assetflow.domain.exceptions import InvalidPolicyError, PolicyValidationError
from assetflow.domain.frequency import validate_policy
from assetflow.domain.models import FrequencyKind, FrequencyPolicy, RecurringAmount
from assetflow.utils.date_utils import add_months, add_years, days_in_month


def next_occurrence(previous: date, policy: FrequencyPolicy) -> date:
    """
    Step one occurrence forward from the previous one.

    SPECIFIC_DAY_OF_MONTH moves to the next calendar month and clips the
    target day to that month's length: day 31 in April is 30 April, never
    1 May.
    """
    kind = policy.kind

    if kind == FrequencyKind.WEEKLY:
        return previous + timedelta(days=7)
    if kind == FrequencyKind.FORTNIGHTLY:
        return previous + timedelta(days=14)
    if kind == FrequencyKind.MONTHLY:
        return add_months(previous, 1)
    if kind == FrequencyKind.YEARLY:
        return add_years(previous, 1)
    if kind == FrequencyKind.EVERY_N_DAYS:
        return previous + timedelta(days=policy.custom_value)
    if kind == FrequencyKind.SPECIFIC_DAY_OF_MONTH:
        target_month = add_months(previous, 1)
        last_day = days_in_month(target_month.year, target_month.month)
        return target_month.replace(day=min(policy.custom_value, last_day))

    raise InvalidPolicyError(f"Unknown frequency kind: {kind!r}")


def generate_occurrences(anchor_date: date, policy: FrequencyPolicy, count: int) -> List[date]:
    """
    Generate the next `count` occurrence dates starting at the anchor.

    Requirements:
    - First element is the anchor date itself
    - Each later date is one step after the previous one (monthly series
      anchored on the 31st drift to the shortest month's day)
    - Same inputs always give the same list

    Args:
        anchor_date: Known next occurrence
        policy: Recurrence rule, validated before any stepping
        count: Number of dates to return (3 or 4 in the preview screens)

    Returns:
        Strictly increasing list of dates

    Raises:
        InvalidPolicyError: Policy fails validation, or stepping runs past date.max
        ValueError: Negative count

    Example:
        EVERY_N_DAYS(28) from 2024-01-01, count 4
        → 2024-01-01, 2024-01-29, 2024-02-26, 2024-03-25
    """
    if count < 0:
        raise ValueError("count must be non-negative")

    try:
        validate_policy(policy)
    except PolicyValidationError as e:
        raise InvalidPolicyError(str(e)) from e

    if count == 0:
        return []

    try:
        return list(
            accumulate(
                repeat(policy, count - 1),
                next_occurrence,
                initial=anchor_date,
            )
        )
    except (OverflowError, ValueError) as e:
        # timedelta overflow or relativedelta landing past year 9999
        raise InvalidPolicyError(f"Occurrences run past {date.max.isoformat()}: {e}") from e


def earliest_upcoming(records: Sequence[RecurringAmount]) -> Optional[RecurringAmount]:
    """Record with the earliest anchor date (the dashboard's next payday / next benefit)"""
    if not records:
        return None
    return min(records, key=lambda r: r.anchor_date)
