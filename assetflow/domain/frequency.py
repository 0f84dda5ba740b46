"""Frequency policy validation and labelling shared by every recurring record"""

from typing import Dict, FrozenSet, Union

from assetflow.domain.exceptions import (
    InvalidCustomValueError,
    InvalidPolicyError,
    UnsupportedFrequencyError,
)
from assetflow.domain.models import FrequencyKind, FrequencyPolicy, RecordContext

MAX_DAY_OF_MONTH = 31

# Spellings used by the record store before the enum was unified
KIND_ALIASES: Dict[str, FrequencyKind] = {
    "EVERY_X_DAYS": FrequencyKind.EVERY_N_DAYS,
    "SPECIFIC_DAY": FrequencyKind.SPECIFIC_DAY_OF_MONTH,
}

SUPPORTED_KINDS: Dict[RecordContext, FrozenSet[FrequencyKind]] = {
    RecordContext.BENEFIT: frozenset(
        {
            FrequencyKind.WEEKLY,
            FrequencyKind.FORTNIGHTLY,
            FrequencyKind.MONTHLY,
            FrequencyKind.YEARLY,
        }
    ),
    RecordContext.PAYDAY: frozenset(FrequencyKind),
    RecordContext.RECURRING_BILL: frozenset(FrequencyKind),
}


def parse_frequency_kind(value: Union[str, FrequencyKind]) -> FrequencyKind:
    """
    Map a stored frequency spelling to FrequencyKind.

    Accepts the enum names case-insensitively plus the legacy aliases
    EVERY_X_DAYS and SPECIFIC_DAY.

    Raises:
        InvalidPolicyError: Unknown spelling
    """
    if isinstance(value, FrequencyKind):
        return value

    key = str(value).strip().upper()
    if key in KIND_ALIASES:
        return KIND_ALIASES[key]
    try:
        return FrequencyKind(key)
    except ValueError as e:
        raise InvalidPolicyError(f"Unknown frequency: {value!r}") from e


def validate_policy(policy: FrequencyPolicy) -> None:
    """
    Check the custom_value constraint for the policy's kind.

    Rules:
    - EVERY_N_DAYS: custom_value >= 1
    - SPECIFIC_DAY_OF_MONTH: 1 <= custom_value <= 31
    - Other kinds ignore custom_value

    Raises:
        InvalidCustomValueError: Constraint violated
    """
    value = policy.custom_value

    if policy.kind == FrequencyKind.EVERY_N_DAYS:
        if value is None or value < 1:
            raise InvalidCustomValueError(
                f"EVERY_N_DAYS requires custom_value >= 1, got {value}"
            )

    elif policy.kind == FrequencyKind.SPECIFIC_DAY_OF_MONTH:
        if value is None or not 1 <= value <= MAX_DAY_OF_MONTH:
            raise InvalidCustomValueError(
                f"SPECIFIC_DAY_OF_MONTH requires custom_value in [1, {MAX_DAY_OF_MONTH}], got {value}"
            )


def ensure_supported(policy: FrequencyPolicy, context: RecordContext) -> None:
    """Reject kinds the record context does not offer (benefits have no custom schedules)"""
    if policy.kind not in SUPPORTED_KINDS[context]:
        raise UnsupportedFrequencyError(
            f"{policy.kind.value} is not supported for {context.value.lower()} records"
        )


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix: 1 -> 'st', 12 -> 'th', 22 -> 'nd'"""
    if 10 <= n % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def describe_policy(policy: FrequencyPolicy) -> str:
    """Human-readable frequency shown next to upcoming dates"""
    if policy.kind == FrequencyKind.EVERY_N_DAYS:
        return f"Every {policy.custom_value} days"
    if policy.kind == FrequencyKind.SPECIFIC_DAY_OF_MONTH:
        day = policy.custom_value
        return f"On the {day}{ordinal_suffix(day)} of every month"
    return policy.kind.value.lower()
