"""POST /v1/projection - Multi-month cash-flow forecast"""

import time
from fastapi import APIRouter, Depends, HTTPException, Request

from assetflow.api.dependencies import get_assumptions, get_request_id
from assetflow.api.v1.schemas import ProjectionPointSchema, ProjectionRequest, ProjectionResponse
from assetflow.config import settings
from assetflow.domain.exceptions import DomainException
from assetflow.domain.models import ProjectionAssumptions
from assetflow.domain.projection import estimate_monthly_flows, project_cash_flow
from assetflow.infrastructure.observability.logging import log_projection, log_rejected_policy
from assetflow.infrastructure.observability.metrics import record_projection, record_rejected_policy

router = APIRouter()


@router.post("/projection", response_model=ProjectionResponse)
def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    assumptions: ProjectionAssumptions = Depends(get_assumptions),
):
    """
    Forecast income, expense and cumulative savings.

    Flow:
    1. Validate every recurring record's frequency policy (422 on failure)
    2. Run the projection engine with configured assumptions
    3. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)
    months = settings.projection_months if request_body.months is None else request_body.months

    try:
        income = [record.to_domain() for record in request_body.income]
        bills = [record.to_domain() for record in request_body.bills]
    except DomainException as e:
        record_rejected_policy(e)
        log_rejected_policy(request_id, e)
        raise HTTPException(status_code=422, detail=str(e))

    points = project_cash_flow(
        income,
        bills,
        request_body.historical_expenses,
        months,
        assumptions=assumptions,
        start=request_body.start,
    )

    if points:
        total_income = points[0].projected_income
        projected_expense = points[0].projected_expense
        final_savings = points[-1].cumulative_savings
    else:
        # Zero-month horizon still reports the monthly figures
        total_income, projected_expense = estimate_monthly_flows(
            income, bills, request_body.historical_expenses, assumptions
        )
        final_savings = 0.0

    duration_ms = (time.time() - start_time) * 1000
    record_projection(final_savings)
    log_projection(request_id, months, total_income, projected_expense, final_savings, duration_ms)

    return ProjectionResponse(
        total_monthly_income=total_income,
        projected_expense=projected_expense,
        points=[
            ProjectionPointSchema(
                month_label=p.month_label,
                month_start=p.month_start,
                projected_income=p.projected_income,
                projected_expense=p.projected_expense,
                net=p.net,
                cumulative_savings=p.cumulative_savings,
            )
            for p in points
        ],
    )
