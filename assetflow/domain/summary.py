"""Current-month totals for the dashboard"""

from datetime import date
from typing import Iterable

from assetflow.domain.models import DatedAmount, MonthSummary
from assetflow.utils.date_utils import month_start


def _total_in_month(transactions: Iterable[DatedAmount], first_day: date) -> float:
    return sum(
        (
            t.amount
            for t in transactions
            if t.date.year == first_day.year and t.date.month == first_day.month
        ),
        0.0,
    )


def summarize_month(
    income: Iterable[DatedAmount],
    expenses: Iterable[DatedAmount],
    month: date | None = None,
) -> MonthSummary:
    """
    Total income and expenses dated within the calendar month containing `month`.

    Transactions outside the month are ignored; balance = income - expenses.
    """
    first_day = month_start(month or date.today())
    total_income = _total_in_month(income, first_day)
    total_expenses = _total_in_month(expenses, first_day)

    return MonthSummary(
        month_start=first_day,
        income=total_income,
        expenses=total_expenses,
        balance=total_income - total_expenses,
    )
