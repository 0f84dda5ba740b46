"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class FrequencyKind(str, Enum):
    """Recurrence rule shared by benefits, paydays and recurring bills"""

    WEEKLY = "WEEKLY"
    FORTNIGHTLY = "FORTNIGHTLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    EVERY_N_DAYS = "EVERY_N_DAYS"
    SPECIFIC_DAY_OF_MONTH = "SPECIFIC_DAY_OF_MONTH"


class RecordContext(str, Enum):
    """Which kind of recurring record a policy belongs to"""

    BENEFIT = "BENEFIT"
    PAYDAY = "PAYDAY"
    RECURRING_BILL = "RECURRING_BILL"


@dataclass(frozen=True)
class FrequencyPolicy:
    """Recurrence rule; custom_value is only read for EVERY_N_DAYS and SPECIFIC_DAY_OF_MONTH"""

    kind: FrequencyKind
    custom_value: Optional[int] = None


@dataclass(frozen=True)
class RecurringAmount:
    """Benefit, payday or recurring bill as fetched from storage"""

    amount: float
    policy: FrequencyPolicy
    anchor_date: date
    label: str = ""
    context: RecordContext = RecordContext.RECURRING_BILL


@dataclass(frozen=True)
class DatedAmount:
    """One-off income or expense transaction"""

    amount: float
    date: date


@dataclass(frozen=True)
class ProjectionAssumptions:
    """Constants feeding the projection formula"""

    base_income: float = 2000.0
    history_divisor: int = 3
    variable_spend_weight: float = 0.5
    fallback_expense: float = 1500.0

    def __post_init__(self) -> None:
        if self.history_divisor < 1:
            raise ValueError(f"history_divisor must be >= 1, got {self.history_divisor}")


@dataclass(frozen=True)
class ProjectionPoint:
    """One forecasted month"""

    month_label: str
    month_start: date
    projected_income: float
    projected_expense: float
    net: float
    cumulative_savings: float


@dataclass(frozen=True)
class MonthSummary:
    """Income and expense totals for a single calendar month"""

    month_start: date
    income: float
    expenses: float
    balance: float
