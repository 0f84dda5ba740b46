"""POST /v1/summary/month - Current-month income and expense totals"""

from fastapi import APIRouter

from assetflow.api.v1.schemas import MonthSummaryRequest, MonthSummaryResponse
from assetflow.domain.summary import summarize_month

router = APIRouter()


@router.post("/summary/month", response_model=MonthSummaryResponse)
def get_month_summary(request_body: MonthSummaryRequest):
    """Totals for the month containing `month` (default: current month)"""
    summary = summarize_month(
        [t.to_domain() for t in request_body.income],
        [t.to_domain() for t in request_body.expenses],
        request_body.month,
    )

    return MonthSummaryResponse(
        month_start=summary.month_start,
        income=summary.income,
        expenses=summary.expenses,
        balance=summary.balance,
    )
