"""Cash-flow projection engine - core business logic for the forecast view"""

from datetime import date
from typing import List, Optional, Sequence, Tuple

from assetflow.domain.models import ProjectionAssumptions, ProjectionPoint, RecurringAmount
from assetflow.domain.normalization import total_monthly_value
from assetflow.utils.date_utils import add_months, format_month_label, month_start


def average_historical_expense(historical_expenses: Sequence[float], history_divisor: int) -> float:
    """
    Coarse monthly estimate of variable spending.

    Divides the total by a fixed divisor (3 by default, i.e. "about three
    months of history") rather than by the real date span. With no samples
    the divisor is 1 and the result is 0.
    """
    total = sum(historical_expenses, 0.0)
    divisor = history_divisor if historical_expenses else 1
    return total / divisor


def blend_expense(
    monthly_fixed_costs: float,
    avg_historical_expense: float,
    assumptions: ProjectionAssumptions,
) -> float:
    """
    Combine recurring bills with historical spending.

    Policy:
    - Bills present: bills in full + weighted share (50%) of history, so
      categories already covered by bills are not counted twice
    - No bills: historical average, or the fallback constant when history
      is empty too
    """
    if monthly_fixed_costs > 0:
        return monthly_fixed_costs + assumptions.variable_spend_weight * avg_historical_expense
    if avg_historical_expense:
        return avg_historical_expense
    return assumptions.fallback_expense


def estimate_monthly_flows(
    income: Sequence[RecurringAmount],
    bills: Sequence[RecurringAmount],
    historical_expenses: Sequence[float],
    assumptions: ProjectionAssumptions,
) -> Tuple[float, float]:
    """Returns (monthly income, monthly expense) used for every projected month"""
    total_monthly_income = total_monthly_value(income) + assumptions.base_income
    monthly_fixed_costs = total_monthly_value(bills)
    avg_expense = average_historical_expense(historical_expenses, assumptions.history_divisor)
    return total_monthly_income, blend_expense(monthly_fixed_costs, avg_expense, assumptions)


def project_cash_flow(
    income: Sequence[RecurringAmount],
    bills: Sequence[RecurringAmount],
    historical_expenses: Sequence[float],
    months: int,
    assumptions: Optional[ProjectionAssumptions] = None,
    start: Optional[date] = None,
) -> List[ProjectionPoint]:
    """
    Main entry point: forecast income, expense and cumulative savings.

    Income and expense are constant across the horizon; only the running
    savings total changes month to month. Sparse data falls back to the
    assumption constants instead of raising, so a forecast can always be
    rendered.

    Args:
        income: Recurring income records (benefits)
        bills: Recurring bill records
        historical_expenses: Past one-off expense amounts
        months: Horizon length (6 in the forecast view)
        assumptions: Formula constants (defaults when omitted)
        start: Any day in the first projected month (default: today)

    Returns:
        One ProjectionPoint per month, in calendar order

    Raises:
        ValueError: Negative horizon
    """
    if months < 0:
        raise ValueError("months must be non-negative")

    if assumptions is None:
        assumptions = ProjectionAssumptions()
    if start is None:
        start = date.today()

    total_monthly_income, projected_expense = estimate_monthly_flows(
        income, bills, historical_expenses, assumptions
    )

    first_month = month_start(start)
    cumulative_savings = 0.0
    points = []

    for i in range(months):
        month = add_months(first_month, i)
        net = total_monthly_income - projected_expense
        cumulative_savings += net

        points.append(
            ProjectionPoint(
                month_label=format_month_label(month),
                month_start=month,
                projected_income=total_monthly_income,
                projected_expense=projected_expense,
                net=net,
                cumulative_savings=cumulative_savings,
            )
        )

    return points
