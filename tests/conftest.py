"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from assetflow.api.main import create_app
from assetflow.domain.models import (
    FrequencyKind,
    FrequencyPolicy,
    ProjectionAssumptions,
    RecordContext,
    RecurringAmount,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def assumptions() -> ProjectionAssumptions:
    """Default projection constants (2000 base income, divisor 3, 50% weight, 1500 fallback)"""
    return ProjectionAssumptions()


@pytest.fixture
def monthly_rent() -> RecurringAmount:
    """$1000 monthly bill"""
    return RecurringAmount(
        amount=1000.0,
        policy=FrequencyPolicy(FrequencyKind.MONTHLY),
        anchor_date=date(2024, 1, 1),
        label="Rent",
    )


@pytest.fixture
def sample_benefits() -> list[RecurringAmount]:
    """Recurring income: weekly child benefit and yearly tax refund"""
    return [
        RecurringAmount(
            amount=30.0,
            policy=FrequencyPolicy(FrequencyKind.WEEKLY),
            anchor_date=date(2024, 1, 3),
            label="Child benefit",
            context=RecordContext.BENEFIT,
        ),
        RecurringAmount(
            amount=1200.0,
            policy=FrequencyPolicy(FrequencyKind.YEARLY),
            anchor_date=date(2024, 4, 15),
            label="Tax refund",
            context=RecordContext.BENEFIT,
        ),
    ]
