"""POST /v1/occurrences - Upcoming dates preview for a recurring record"""

from fastapi import APIRouter, HTTPException, Request

from assetflow.api.dependencies import get_request_id
from assetflow.api.v1.schemas import OccurrenceRequest, OccurrenceResponse
from assetflow.config import settings
from assetflow.domain.exceptions import DomainException
from assetflow.domain.frequency import describe_policy, ensure_supported, parse_frequency_kind
from assetflow.domain.models import FrequencyPolicy
from assetflow.domain.occurrences import generate_occurrences
from assetflow.infrastructure.observability.logging import log_rejected_policy
from assetflow.infrastructure.observability.metrics import (
    occurrence_preview_counter,
    record_rejected_policy,
)

router = APIRouter()


@router.post("/occurrences", response_model=OccurrenceResponse)
def preview_occurrences(request_body: OccurrenceRequest, request: Request):
    """
    Generate the next occurrence dates for a benefit, payday or bill.

    Returns:
        Anchor date followed by the next count-1 occurrences
    """
    request_id = get_request_id(request)
    count = settings.preview_count if request_body.count is None else request_body.count

    try:
        policy = FrequencyPolicy(
            kind=parse_frequency_kind(request_body.frequency),
            custom_value=request_body.custom_value,
        )
        ensure_supported(policy, request_body.context)
        dates = generate_occurrences(request_body.anchor_date, policy, count)
    except DomainException as e:
        record_rejected_policy(e)
        log_rejected_policy(request_id, e)
        raise HTTPException(status_code=422, detail=str(e))

    occurrence_preview_counter.labels(frequency=policy.kind.value).inc()

    return OccurrenceResponse(
        frequency=policy.kind,
        description=describe_policy(policy),
        dates=dates,
    )
