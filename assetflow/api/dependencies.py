"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from assetflow.config import settings
from assetflow.domain.models import ProjectionAssumptions


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_assumptions() -> ProjectionAssumptions:
    """Projection constants from configuration"""
    return ProjectionAssumptions(
        base_income=settings.base_income_assumption,
        history_divisor=settings.history_divisor,
        variable_spend_weight=settings.variable_spend_weight,
        fallback_expense=settings.fallback_monthly_expense,
    )
