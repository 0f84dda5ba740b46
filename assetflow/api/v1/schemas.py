"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

from assetflow.domain.frequency import ensure_supported, parse_frequency_kind, validate_policy
from assetflow.domain.models import (
    DatedAmount,
    FrequencyKind,
    FrequencyPolicy,
    RecordContext,
    RecurringAmount,
)


class RecurringRecordSchema(BaseModel):
    """Benefit, payday or recurring bill snapshot"""

    amount: float = Field(0.0, ge=0, description="Amount per occurrence (0 for paydays)")
    frequency: str = Field(..., min_length=1, description="Frequency kind, e.g. WEEKLY or EVERY_X_DAYS")
    custom_value: Optional[int] = Field(None, description="Interval in days or day of month")
    anchor_date: date = Field(..., description="Next known occurrence")
    label: str = ""
    context: RecordContext = RecordContext.RECURRING_BILL

    def to_policy(self) -> FrequencyPolicy:
        """Parse and validate the policy; raises domain exceptions"""
        policy = FrequencyPolicy(kind=parse_frequency_kind(self.frequency), custom_value=self.custom_value)
        validate_policy(policy)
        ensure_supported(policy, self.context)
        return policy

    def to_domain(self) -> RecurringAmount:
        return RecurringAmount(
            amount=self.amount,
            policy=self.to_policy(),
            anchor_date=self.anchor_date,
            label=self.label,
            context=self.context,
        )


class IncomeRecordSchema(RecurringRecordSchema):
    """Recurring income; treated as a benefit unless the caller says otherwise"""

    context: RecordContext = Field(
        RecordContext.BENEFIT,
        description="Defaults to BENEFIT, which only accepts WEEKLY, FORTNIGHTLY, MONTHLY and YEARLY",
    )


class OccurrenceRequest(BaseModel):
    """Request body for POST /v1/occurrences"""

    anchor_date: date
    frequency: str = Field(..., min_length=1)
    custom_value: Optional[int] = None
    count: Optional[int] = Field(None, ge=0, le=60, description="Number of dates (default from settings)")
    context: RecordContext = RecordContext.RECURRING_BILL


class OccurrenceResponse(BaseModel):
    """Response for POST /v1/occurrences"""

    frequency: FrequencyKind
    description: str
    dates: List[date]


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection"""

    income: List[IncomeRecordSchema] = Field(default_factory=list)
    bills: List[RecurringRecordSchema] = Field(default_factory=list)
    historical_expenses: List[float] = Field(default_factory=list)
    months: Optional[int] = Field(None, ge=0, le=60, description="Horizon (default from settings)")
    start: Optional[date] = Field(None, description="Any day in the first projected month")


class ProjectionPointSchema(BaseModel):
    """Single forecasted month"""

    month_label: str
    month_start: date
    projected_income: float
    projected_expense: float
    net: float
    cumulative_savings: float


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    total_monthly_income: float
    projected_expense: float
    points: List[ProjectionPointSchema]


class DatedAmountSchema(BaseModel):
    """One-off income or expense transaction"""

    amount: float = Field(..., ge=0)
    date: date

    def to_domain(self) -> DatedAmount:
        return DatedAmount(amount=self.amount, date=self.date)


class MonthSummaryRequest(BaseModel):
    """Request body for POST /v1/summary/month"""

    income: List[DatedAmountSchema] = Field(default_factory=list)
    expenses: List[DatedAmountSchema] = Field(default_factory=list)
    month: Optional[date] = None


class MonthSummaryResponse(BaseModel):
    """Response for POST /v1/summary/month"""

    month_start: date
    income: float
    expenses: float
    balance: float
